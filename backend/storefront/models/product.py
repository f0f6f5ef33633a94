"""Product ORM — persists a catalog entry and owns its reviews.

Invariants:
    - id is an autoincrement integer primary key (store-assigned)
    - price and quantity are non-nullable; quantity is not clamped at zero
    - reviews are loaded in insertion order and deleted with the product

Design Decisions:
    - passive_deletes: the repository removes reviews in the same statement batch,
      and PostgreSQL also cascades through the FK
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.db.base import Base


class Product(Base):
    """Product entity — a sellable catalog item."""
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    reviews: Mapped[list["Review"]] = relationship(
        "Review", back_populates="product",
        order_by="Review.id", passive_deletes=True, lazy="selectin",
    )
