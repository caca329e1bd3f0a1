import logging

from marketplace.core.database import get_session
from marketplace.core.router import CommandContext, Router
from marketplace.services.user_service import UserService
from marketplace.utils.validators import validate_coordinate, validate_required

router = Router()
logger = logging.getLogger(__name__)


@router.command(1, "Create user")
async def cmd_create_user(ctx: CommandContext):
    console = ctx.console

    name = await console.ask("\tEnter name: ")
    password = await console.ask("\tEnter password: ")
    # координаты вводятся в диапазоне [0.0, 100.0]
    latitude = await console.ask("\tEnter latitude: ")
    longitude = await console.ask("\tEnter longitude: ")

    try:
        name = validate_required(name, "Name")
        password = validate_required(password, "Password")
        latitude = validate_coordinate(latitude, "Latitude")
        longitude = validate_coordinate(longitude, "Longitude")

        async with get_session() as session:
            user_service = UserService(session)
            await user_service.register(name, password, latitude, longitude)
    except ValueError as e:
        console.write(f"Error: {e}")
        return

    console.write("User successfully created!")


@router.command(2, "Log in")
async def cmd_log_in(ctx: CommandContext):
    console = ctx.console

    name = await console.ask("\tEnter name: ")
    password = await console.ask("\tEnter password: ")

    async with get_session() as session:
        user_service = UserService(session)
        principal = await user_service.login(name.strip(), password.strip())

    if principal is None:
        console.write("Log in failed: wrong name or password.")
        return

    ctx.state.log_in(principal)
    console.write(f"Welcome, {principal.name}!")


@router.command(9, "< EXIT")
async def cmd_exit(ctx: CommandContext):
    ctx.state.running = False
