"""seed sample products

Insert the starter catalogue. Skips any name already present so the
revision is safe to run against a database populated by hand.

Revision ID: e9d4b6a27c38
Revises: c5a0f3e81b92
Create Date: 2026-10-12 10:20:36.771903

"""

from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "e9d4b6a27c38"
down_revision: Union[str, Sequence[str], None] = "c5a0f3e81b92"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SAMPLE_PRODUCTS = [
    ("Apple", 30, 100),
    ("Banana", 15, 150),
    ("Carrot", 20, 120),
    ("Tomato", 25, 80),
    ("Cucumber", 18, 90),
]

products = sa.table(
    "products",
    sa.column("name", sa.String),
    sa.column("price", sa.Integer),
    sa.column("quantity", sa.Integer),
    sa.column("created_at", sa.DateTime(timezone=True)),
    sa.column("updated_at", sa.DateTime(timezone=True)),
)


def upgrade() -> None:
    """Upgrade schema."""
    conn = op.get_bind()
    existing = set(conn.execute(sa.select(products.c.name)).scalars())
    now = datetime.now(timezone.utc)

    rows = [
        {
            "name": name,
            "price": price,
            "quantity": quantity,
            "created_at": now,
            "updated_at": now,
        }
        for name, price, quantity in SAMPLE_PRODUCTS
        if name not in existing
    ]
    if rows:
        op.bulk_insert(products, rows)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute(
        products.delete().where(
            products.c.name.in_([name for name, _, _ in SAMPLE_PRODUCTS])
        )
    )
