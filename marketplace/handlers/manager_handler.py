import logging
from typing import Optional

from marketplace.core.database import get_session
from marketplace.core.router import CommandContext, Router
from marketplace.services.authorization_service import (
    AccessDecision,
    AuthorizationService,
    NOT_STORE_MANAGER_TEXT,
)
from marketplace.services.order_service import OrderService
from marketplace.services.product_service import ProductService
from marketplace.utils.tables import print_rows
from marketplace.utils.validators import (
    is_yes,
    validate_identifier,
    validate_price,
    validate_required,
    validate_units,
)

router = Router()
logger = logging.getLogger(__name__)

NO_PERMISSIONS_TEXT = "User does not have permissions. Access denied."
PERMISSION_CHECK_FAILED_TEXT = "Unable to verify permissions right now."
PRODUCT_NOT_AVAILABLE_TEXT = "This product is not available at this location."


def _passed(
    ctx: CommandContext, decision: AccessDecision, denied_text: Optional[str] = None
) -> bool:
    """Сообщает пользователю об отказе; сбой базы и отказ различаются"""
    if decision.allowed:
        return True
    if decision.is_error:
        ctx.console.write(PERMISSION_CHECK_FAILED_TEXT)
    elif denied_text and decision.user is not None:
        ctx.console.write(denied_text)
    else:
        ctx.console.write(decision.reason)
    return False


async def _check_elevated(
    ctx: CommandContext, denied_text: Optional[str] = None
) -> AccessDecision:
    async with get_session() as session:
        decision = await AuthorizationService(session).check_elevated(ctx.principal)
    _passed(ctx, decision, denied_text)
    return decision


async def _check_store_access(ctx: CommandContext, store_id: int) -> AccessDecision:
    async with get_session() as session:
        decision = await AuthorizationService(session).check_store_access(
            ctx.principal, store_id
        )
    _passed(ctx, decision)
    return decision


@router.command(5, "Update Product", elevated=True)
async def cmd_update_product(ctx: CommandContext):
    """Изменение цены и/или остатка товара менеджером магазина"""
    console = ctx.console

    # две отдельные проверки: роль, затем владение магазином
    if not await _check_elevated(ctx, NO_PERMISSIONS_TEXT):
        return

    try:
        store_id = validate_identifier(await console.ask("\tEnter StoreID: "), "StoreID")
    except ValueError as e:
        console.write(f"Error: {e}")
        return

    decision = await _check_store_access(ctx, store_id)
    if not decision:
        return

    try:
        product_name = validate_required(
            await console.ask("\tEnter Product Name: "), "Product name"
        )
    except ValueError as e:
        console.write(f"Error: {e}")
        return

    async with get_session() as session:
        product = await ProductService(session).get_product(store_id, product_name)
    if not product:
        console.write(PRODUCT_NOT_AVAILABLE_TEXT)
        return

    new_price = None
    new_units = None
    try:
        if is_yes(await console.ask("\tUpdate price? y/n: ")):
            new_price = validate_price(await console.ask("\tAssign new price: "))
        if is_yes(await console.ask("\tUpdate stock? y/n: ")):
            new_units = validate_units(
                await console.ask("\tAssign new numberofUnits: "), allow_zero=True
            )
    except ValueError as e:
        console.write(f"Error: {e}")
        return

    async with get_session() as session:
        update = await ProductService(session).update_product(
            decision.user, store_id, product_name, new_price, new_units
        )

    if update is None:
        console.write("Nothing to update.")
        return
    console.write(f"Product updated (update #{update.update_number}).")


@router.command(6, "View 5 recent Product Updates Info", elevated=True)
async def cmd_recent_updates(ctx: CommandContext):
    decision = await _check_elevated(ctx, NOT_STORE_MANAGER_TEXT)
    if not decision:
        return

    async with get_session() as session:
        updates = await ProductService(session).recent_updates(decision.user)

    print_rows(
        ctx.console,
        updates,
        ["update_number", "manager_id", "store_id", "product_name", "updated_on"],
        "No product updates found.",
    )


@router.command(7, "View 5 Popular Items", elevated=True)
async def cmd_popular_products(ctx: CommandContext):
    decision = await _check_elevated(ctx)
    if not decision:
        return

    async with get_session() as session:
        products = await OrderService(session).popular_products(decision.user)

    print_rows(
        ctx.console, products, ["product_name", "order_count"], "No popular items found."
    )


@router.command(8, "View 5 Popular Customers", elevated=True)
async def cmd_popular_customers(ctx: CommandContext):
    decision = await _check_elevated(ctx)
    if not decision:
        return

    async with get_session() as session:
        customers = await OrderService(session).popular_customers(decision.user)

    print_rows(
        ctx.console,
        customers,
        ["customer_name", "order_count"],
        "No popular customers found.",
    )


@router.command(9, "Place Product Supply Request to Warehouse", elevated=True)
async def cmd_supply_request(ctx: CommandContext):
    console = ctx.console

    if not await _check_elevated(ctx):
        return

    try:
        store_id = validate_identifier(await console.ask("\tEnter StoreID: "), "StoreID")
    except ValueError as e:
        console.write(f"Error: {e}")
        return

    decision = await _check_store_access(ctx, store_id)
    if not decision:
        return

    try:
        product_name = validate_required(
            await console.ask("\tEnter Product Name: "), "Product name"
        )
        warehouse_id = validate_identifier(
            await console.ask("\tEnter warehouse ID: "), "Warehouse ID"
        )
        units = validate_units(await console.ask("\tRequest how many units?: "))
    except ValueError as e:
        console.write(f"Error: {e}")
        return

    async with get_session() as session:
        request = await ProductService(session).request_supply(
            decision.user, store_id, product_name, warehouse_id, units
        )

    if request is None:
        console.write(PRODUCT_NOT_AVAILABLE_TEXT)
        return
    console.write(f"Supply request #{request.request_number} placed.")
