from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Principal:
    """Учетные данные вошедшего пользователя.

    Имя и пароль используются как ключ для повторной проверки прав
    при каждой команде, отдельный токен сессии не выдается.
    """

    name: str
    password: str

    def __repr__(self) -> str:
        return f"Principal(name={self.name!r})"


@dataclass
class SessionState:
    principal: Optional[Principal] = None
    running: bool = True

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None

    def log_in(self, principal: Principal) -> None:
        self.principal = principal

    def log_out(self) -> None:
        self.principal = None
