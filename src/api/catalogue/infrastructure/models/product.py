"""SQLAlchemy ORM model for the products table."""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ProductModel(Base, TimestampMixin):
    """ORM model for products table.

    The check constraint backs the no-negative-stock rule at the storage
    layer in case any future write bypasses the conditional decrement.
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<ProductModel(id={self.id}, name={self.name}, quantity={self.quantity})>"
        )
