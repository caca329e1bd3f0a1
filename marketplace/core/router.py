import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

from marketplace.core.session import Principal, SessionState
from marketplace.utils.console import Console

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    console: Console
    state: SessionState = field(default_factory=SessionState)

    @property
    def principal(self) -> Optional[Principal]:
        return self.state.principal


Handler = Callable[[CommandContext], Awaitable[None]]


@dataclass
class Command:
    choice: int
    title: str
    callback: Handler
    elevated: bool = False
    footer: bool = False


class Router:
    """Набор команд меню, регистрируемых декоратором"""

    def __init__(self):
        self.commands: List[Command] = []

    def command(
        self, choice: int, title: str, elevated: bool = False, footer: bool = False
    ):
        def decorator(callback: Handler) -> Handler:
            self.commands.append(Command(choice, title, callback, elevated, footer))
            return callback

        return decorator


class Dispatcher:
    def __init__(self, name: str):
        self.name = name
        self._commands: Dict[int, Command] = {}

    def include_router(self, router: Router) -> None:
        for command in router.commands:
            if command.choice in self._commands:
                raise ValueError(
                    f"Duplicate menu choice {command.choice} in {self.name} menu"
                )
            self._commands[command.choice] = command

    def visible_commands(self, elevated: bool = False) -> List[Command]:
        """Команды для отрисовки меню; скрытие команд только косметическое"""
        return [
            command
            for _, command in sorted(self._commands.items())
            if elevated or not command.elevated
        ]

    async def dispatch(self, choice: int, ctx: CommandContext) -> bool:
        """Выполняет команду по номеру пункта меню.

        Returns:
            bool: False, если такого пункта нет
        """
        command = self._commands.get(choice)
        if command is None:
            return False

        try:
            await command.callback(ctx)
        except EOFError:
            raise
        except Exception as exc:
            await self.error_handler(exc, command)
        return True

    async def error_handler(self, exception: Exception, command: Command) -> None:
        logger.error(
            "Exception %s, command %s (%s)", exception, command.choice, command.title
        )
