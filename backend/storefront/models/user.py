"""User ORM — account record with credentials, role and balance.

Invariants:
    - username is unique and never changes after registration
    - password holds a bcrypt hash, never plaintext
    - token is the last issued bearer token (informational, never validated)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base


class User(Base):
    """User entity."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    password: Mapped[str] = mapped_column(String(200), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="user")
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    saldo: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    token: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
