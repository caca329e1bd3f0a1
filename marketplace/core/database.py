from contextlib import asynccontextmanager
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base

from marketplace.core.config import DB_ECHO

engine: Optional[AsyncEngine] = None
AsyncSessionLocal: Optional[sessionmaker] = None
Base = declarative_base()


def init_engine(database_url: str) -> AsyncEngine:
    """Создает движок и фабрику сессий для указанной базы данных"""
    global engine, AsyncSessionLocal

    engine = create_async_engine(database_url, echo=DB_ECHO, future=True)
    AsyncSessionLocal = sessionmaker(
        engine, expire_on_commit=False, class_=AsyncSession
    )
    return engine


@asynccontextmanager
async def get_session():
    if AsyncSessionLocal is None:
        raise RuntimeError("Database engine is not initialized")
    async with AsyncSessionLocal() as session:
        yield session
