"""Create marketplace tables

Revision ID: 3f1c9a7be210
Revises:
Create Date: 2026-10-18 10:12:41.508214

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "3f1c9a7be210"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, index=True),
        sa.Column("name", sa.String, nullable=False, index=True),
        sa.Column("password", sa.String, nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("type", sa.String, nullable=False),
    )

    op.create_table(
        "stores",
        sa.Column("id", sa.Integer, primary_key=True, index=True, autoincrement=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("manager_id", sa.Integer, sa.ForeignKey("users.id"), nullable=True),
    )

    op.create_table(
        "products",
        sa.Column("store_id", sa.Integer, sa.ForeignKey("stores.id"), primary_key=True),
        sa.Column("product_name", sa.String, primary_key=True),
        sa.Column("number_of_units", sa.Integer, nullable=False),
        sa.Column("price_per_unit", sa.Float, nullable=False),
        sa.CheckConstraint(
            "number_of_units >= 0", name="ck_products_units_non_negative"
        ),
    )

    op.create_table(
        "orders",
        sa.Column("order_number", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("customer_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("store_id", sa.Integer, sa.ForeignKey("stores.id"), nullable=False),
        sa.Column("product_name", sa.String, nullable=False),
        sa.Column("units_ordered", sa.Integer, nullable=False),
        sa.Column("order_time", sa.DateTime, nullable=False),
    )

    op.create_table(
        "product_updates",
        sa.Column("update_number", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("manager_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("store_id", sa.Integer, sa.ForeignKey("stores.id"), nullable=False),
        sa.Column("product_name", sa.String, nullable=False),
        sa.Column("updated_on", sa.DateTime, nullable=False),
    )

    op.create_table(
        "product_supply_requests",
        sa.Column("request_number", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("manager_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("warehouse_id", sa.Integer, nullable=False),
        sa.Column("store_id", sa.Integer, sa.ForeignKey("stores.id"), nullable=False),
        sa.Column("product_name", sa.String, nullable=False),
        sa.Column("units_requested", sa.Integer, nullable=False),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("product_supply_requests")
    op.drop_table("product_updates")
    op.drop_table("orders")
    op.drop_table("products")
    op.drop_table("stores")
    op.drop_table("users")
