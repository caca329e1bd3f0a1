import pytest

from marketplace.core.router import CommandContext, Dispatcher, Router
from marketplace.utils.console import INVALID_INPUT_TEXT
from marketplace.utils.menu import get_menu_text


@pytest.mark.asyncio
async def test_read_choice_reprompts_on_invalid_input(make_console):
    console = make_console("abc", "", "4")

    assert await console.read_choice() == 4
    assert console.stdout.getvalue().count(INVALID_INPUT_TEXT) == 2


@pytest.mark.asyncio
async def test_read_choice_accepts_any_integer(make_console):
    console = make_console("12345")
    assert await console.read_choice() == 12345


@pytest.mark.asyncio
async def test_end_of_input(make_console):
    console = make_console()
    with pytest.raises(EOFError):
        await console.ask("name: ")


@pytest.mark.asyncio
async def test_dispatcher_error_handler_keeps_loop_alive(make_console, caplog):
    router = Router()

    @router.command(1, "Broken")
    async def broken(ctx):
        raise RuntimeError("boom")

    dp = Dispatcher("test")
    dp.include_router(router)
    ctx = CommandContext(make_console())

    assert await dp.dispatch(1, ctx) is True
    assert "boom" in caplog.text
    assert await dp.dispatch(2, ctx) is False


def test_duplicate_choice_rejected():
    first, second = Router(), Router()

    @first.command(1, "One")
    async def one(ctx):
        pass

    @second.command(1, "Also one")
    async def also_one(ctx):
        pass

    dp = Dispatcher("test")
    dp.include_router(first)
    with pytest.raises(ValueError):
        dp.include_router(second)


def test_menu_hides_elevated_commands():
    router = Router()

    @router.command(1, "Public")
    async def public(ctx):
        pass

    @router.command(5, "Managers only", elevated=True)
    async def managers(ctx):
        pass

    @router.command(20, "Log out", footer=True)
    async def log_out(ctx):
        pass

    dp = Dispatcher("test")
    dp.include_router(router)

    text = get_menu_text(dp.visible_commands(elevated=False))
    assert "1. Public" in text
    assert "Managers only" not in text
    assert text.splitlines()[-1] == "20. Log out"

    assert "5. Managers only" in get_menu_text(dp.visible_commands(elevated=True))
