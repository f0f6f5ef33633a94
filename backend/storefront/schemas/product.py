"""Product Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ProductCreate/ProductReplace require every non-optional field (full state)
    - ProductPatch fields are all optional; only fields the client sent are applied
    - price is non-negative; quantity is a non-negative integer on create/replace
    - StockAdjustment.delta may be negative (stock is not clamped)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ProductCreate(BaseModel):
    """Product creation — every catalog field except category is required."""
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    image: str = Field(min_length=1, max_length=2000)
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    category: str | None = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProductReplace(ProductCreate):
    """Full replacement (PUT) — same shape as creation."""


class ProductPatch(BaseModel):
    """Partial update (PATCH)."""
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    image: str | None = Field(None, max_length=2000)
    price: float | None = Field(None, ge=0)
    quantity: int | None = Field(None, ge=0)
    category: str | None = Field(None, max_length=100)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for field in ("name", "description", "image", "price", "quantity"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class StockAdjustment(BaseModel):
    """Additive stock change."""
    delta: int


class ReviewCreate(BaseModel):
    """Review submission for a product."""
    author: str = Field(min_length=1, max_length=100)
    rating: int = Field(ge=1, le=5)
    comment: str = Field("", max_length=5000)


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int
    author: str
    rating: int
    comment: str


class ProductResponse(BaseModel):
    """Product response — public-facing catalog entry with its reviews."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    image: str
    price: float
    quantity: int
    category: str | None = None
    reviews: list[ReviewResponse] = []
