from sqlalchemy import Table, func, select
from sqlalchemy.ext.asyncio import AsyncSession

import marketplace.models  # noqa: F401  регистрирует таблицы в метаданных
from marketplace.core.database import Base


class SequenceService:
    """Выдает следующий номер для таблиц, пополняемых только вставками.

    Номер равен количеству строк + 1 и уникален лишь на момент подсчета:
    параллельная вставка может получить тот же номер, и тогда транзакция
    упадет на первичном ключе.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def resolve_table(table_name: str) -> Table:
        """Находит таблицу по имени без учета регистра и подчеркиваний"""
        key = table_name.replace("_", "").lower()
        for name, table in Base.metadata.tables.items():
            if name.replace("_", "").lower() == key:
                return table
        raise ValueError(f"Unknown table: {table_name}")

    async def next_id(self, table_name: str) -> int:
        table = self.resolve_table(table_name)
        result = await self.session.execute(select(func.count()).select_from(table))
        return (result.scalar() or 0) + 1
