import pytest
from unittest.mock import patch, AsyncMock

from marketplace.main import build_dispatchers, main, run, USAGE_TEXT
from marketplace.services.order_service import OrderService


@pytest.mark.asyncio
async def test_session_flow(engine, marketplace_data, make_console):
    console = make_console(
        "1", "eve", "pw", "1.0", "2.0",  # регистрация
        "2", "eve", "pw",                 # вход
        "77",                             # неизвестный пункт
        "5",                              # покупатель вызывает пункт менеджера
        "20",                             # выход из учетной записи
        "9",                              # выход
    )
    guest, member = build_dispatchers()

    state = await run(console, guest, member)

    text = console.stdout.getvalue()
    assert "User successfully created!" in text
    assert "Welcome, eve!" in text
    assert "Unrecognized choice!" in text
    assert "User does not have permissions. Access denied." in text
    assert "5. Update Product" not in text
    assert not state.running
    assert state.principal is None


@pytest.mark.asyncio
async def test_manager_sees_elevated_menu(engine, marketplace_data, make_console):
    console = make_console("2", "bob", "bobpw", "20", "9")
    guest, member = build_dispatchers()

    await run(console, guest, member)

    text = console.stdout.getvalue()
    assert "5. Update Product" in text
    assert "9. Place Product Supply Request to Warehouse" in text


@pytest.mark.asyncio
async def test_failed_login_keeps_guest_state(engine, marketplace_data, make_console):
    console = make_console("2", "root", "guess")
    guest, member = build_dispatchers()

    state = await run(console, guest, member)

    assert "Log in failed" in console.stdout.getvalue()
    assert state.principal is None


@pytest.mark.asyncio
async def test_command_failure_does_not_end_session(
    engine, marketplace_data, make_console, caplog
):
    console = make_console("2", "alice", "secret", "3", "1", "Widget", "1", "20", "9")
    guest, member = build_dispatchers()

    with patch.object(
        OrderService, "place_order", side_effect=RuntimeError("connection lost")
    ):
        state = await run(console, guest, member)

    assert "connection lost" in caplog.text
    assert not state.running


@pytest.mark.asyncio
async def test_usage_on_wrong_arguments(capsys):
    assert await main(["only-db"]) == 0
    assert USAGE_TEXT in capsys.readouterr().err


@pytest.mark.asyncio
async def test_connection_failure_exits_with_error(make_console, caplog):
    console = make_console()
    with patch("marketplace.main.on_startup", AsyncMock(side_effect=OSError("refused"))):
        assert await main(["shop", "5432", "postgres"], console=console) == 1

    assert "Unable to connect to database" in caplog.text


@pytest.mark.asyncio
async def test_main_runs_against_sqlite(tmp_path, make_console):
    console = make_console("9")
    url = f"sqlite+aiosqlite:///{tmp_path / 'main.db'}"

    with patch("marketplace.main.build_database_url", return_value=url):
        assert await main(["shop", "5432", "postgres"], console=console) == 0

    text = console.stdout.getvalue()
    assert "Connecting to database...Done" in text
    assert "Bye !" in text
