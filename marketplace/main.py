import asyncio
import logging
import sys
from typing import List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

import marketplace.models  # noqa: F401
from marketplace.core.config import LOG_LEVEL, build_database_url
from marketplace.core.database import Base, init_engine, get_session
from marketplace.core.router import CommandContext, Dispatcher
from marketplace.core.session import Principal, SessionState
from marketplace.handlers.auth_handler import router as auth_router
from marketplace.handlers.customer_handler import router as customer_router
from marketplace.handlers.manager_handler import router as manager_router
from marketplace.services.authorization_service import AuthorizationService
from marketplace.utils.console import Console
from marketplace.utils.menu import GREETING_TEXT, UNRECOGNIZED_CHOICE_TEXT, get_menu_text

logger = logging.getLogger(__name__)

USAGE_TEXT = "Usage: python -m marketplace <dbname> <port> <user>"


def build_dispatchers() -> Tuple[Dispatcher, Dispatcher]:
    """Меню гостя и меню вошедшего пользователя"""
    guest = Dispatcher("guest")
    guest.include_router(auth_router)

    member = Dispatcher("member")
    member.include_router(customer_router)
    member.include_router(manager_router)
    return guest, member


async def on_startup(engine: AsyncEngine):
    # Создаем недостающие таблицы в БД
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def has_elevated_access(principal: Principal) -> bool:
    async with get_session() as session:
        return await AuthorizationService(session).has_elevated_access(principal)


async def run(console: Console, guest: Dispatcher, member: Dispatcher) -> SessionState:
    """Основной цикл: одна команда обрабатывается целиком до следующего ввода"""
    state = SessionState()
    ctx = CommandContext(console, state)

    try:
        while state.running:
            if state.is_authenticated:
                dispatcher = member
                # пункты для менеджеров только скрываются, права проверяют обработчики
                elevated = await has_elevated_access(state.principal)
            else:
                dispatcher = guest
                elevated = False

            console.write(get_menu_text(dispatcher.visible_commands(elevated)))
            choice = await console.read_choice()
            if not await dispatcher.dispatch(choice, ctx):
                console.write(UNRECOGNIZED_CHOICE_TEXT)
    except EOFError:
        logger.info("Ввод завершен, выход из программы")
        state.running = False

    return state


async def main(argv: List[str], console: Console = None) -> int:
    if len(argv) != 3:
        print(USAGE_TEXT, file=sys.stderr)
        return 0

    console = console or Console()
    console.write(GREETING_TEXT)

    dbname, port, user = argv
    console.write("Connecting to database...", end="")
    engine = init_engine(build_database_url(dbname, port, user))

    try:
        await on_startup(engine)
    except (SQLAlchemyError, OSError) as e:
        logger.error("Unable to connect to database: %s", e)
        console.write("Make sure you started postgres on this machine")
        await engine.dispose()
        return 1
    console.write("Done")

    guest, member = build_dispatchers()
    try:
        await run(console, guest, member)
    finally:
        console.write("Disconnecting from database...", end="")
        await engine.dispose()
        console.write("Done\n\nBye !")
    return 0


def cli():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    sys.exit(asyncio.run(main(sys.argv[1:])))


if __name__ == "__main__":
    cli()
