import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.database import get_session
from marketplace.core.router import CommandContext, Router
from marketplace.core.states import OrderState
from marketplace.models.user import User
from marketplace.services.order_service import OrderService
from marketplace.services.product_service import ProductService
from marketplace.services.store_service import StoreService
from marketplace.services.user_service import UserService
from marketplace.utils.tables import print_rows
from marketplace.utils.validators import (
    validate_identifier,
    validate_required,
    validate_units,
)

router = Router()
logger = logging.getLogger(__name__)

ACCOUNT_NOT_FOUND_TEXT = "Error: your account could not be found. Please log in again."


async def _current_user(ctx: CommandContext, session: AsyncSession) -> Optional[User]:
    if ctx.principal is None:
        return None
    user = await UserService(session).get_current_user(ctx.principal)
    if not user:
        ctx.console.write(ACCOUNT_NOT_FOUND_TEXT)
    return user


@router.command(1, "View Stores within 30 miles")
async def cmd_view_stores(ctx: CommandContext):
    async with get_session() as session:
        user = await _current_user(ctx, session)
        if not user:
            return
        stores = await StoreService(session).list_nearby(user)

    print_rows(
        ctx.console,
        stores,
        ["store_id", "latitude", "longitude", "distance"],
        "No stores within 30 miles.",
    )


@router.command(2, "View Product List")
async def cmd_view_products(ctx: CommandContext):
    try:
        store_id = validate_identifier(await ctx.console.ask("\tEnter StoreID: "), "StoreID")
    except ValueError as e:
        ctx.console.write(f"Error: {e}")
        return

    async with get_session() as session:
        products = await ProductService(session).list_products(store_id)

    print_rows(
        ctx.console,
        products,
        ["product_name", "number_of_units", "price_per_unit"],
        "No products found for this store.",
    )


@router.command(3, "Place a Order")
async def cmd_place_order(ctx: CommandContext):
    console = ctx.console

    logger.debug(
        "Заказ покупателя %s: %s", ctx.principal.name, OrderState.COLLECTING_INPUT.value
    )
    store_id = await console.ask("\tEnter StoreID: ")
    product_name = await console.ask("\tEnter Product Name: ")
    units = await console.ask("\tEnter Number of Units: ")

    try:
        store_id = validate_identifier(store_id, "StoreID")
        product_name = validate_required(product_name, "Product name")
        units = validate_units(units)
    except ValueError as e:
        logger.info("Заказ отклонен: %s", e)
        console.write(f"Error: {e}")
        return

    async with get_session() as session:
        user = await _current_user(ctx, session)
        if not user:
            return
        outcome = await OrderService(session).place_order(
            user, store_id, product_name, units
        )

    console.write(outcome.message)


@router.command(4, "View 5 recent orders")
async def cmd_recent_orders(ctx: CommandContext):
    async with get_session() as session:
        user = await _current_user(ctx, session)
        if not user:
            return
        orders = await OrderService(session).recent_orders(user)

    columns = list(orders[0].keys()) if orders else []
    print_rows(ctx.console, orders, columns, "No orders found.")


@router.command(20, "Log out", footer=True)
async def cmd_log_out(ctx: CommandContext):
    ctx.state.log_out()
