"""create items, purchases and purchase_lines

Revision ID: 3f2a9c1d7e40
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "items",
        sa.Column("id", ID_TYPE, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("stock", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        # le plancher de stock est aussi garanti par la base
        sa.CheckConstraint("stock >= 0", name="ck_items_stock_nonneg"),
        sa.CheckConstraint("price >= 0", name="ck_items_price_nonneg"),
    )

    op.create_table(
        "purchases",
        sa.Column("id", ID_TYPE, primary_key=True),
        sa.Column("customer_name", sa.Text(), nullable=False),
        sa.Column("shipping_address", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "purchase_lines",
        sa.Column("id", ID_TYPE, primary_key=True),
        sa.Column(
            "purchase_id",
            ID_TYPE,
            sa.ForeignKey("purchases.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "item_id",
            ID_TYPE,
            sa.ForeignKey("items.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.CheckConstraint("quantity > 0", name="ck_purchase_lines_qty_pos"),
    )
    op.create_index("ix_purchase_lines_purchase", "purchase_lines", ["purchase_id"])
    op.create_index("ix_purchase_lines_item", "purchase_lines", ["item_id"])


def downgrade() -> None:
    op.drop_index("ix_purchase_lines_item", table_name="purchase_lines")
    op.drop_index("ix_purchase_lines_purchase", table_name="purchase_lines")
    op.drop_table("purchase_lines")
    op.drop_table("purchases")
    op.drop_table("items")
