"""User Schemas — request/response contracts for account endpoints.

Invariants:
    - UserResponse never exposes password hashes or stored tokens
    - UserCreate.username is optional here: the service owns the "Username is required" rule
    - username is not editable through UserReplace/UserPatch
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from storefront.core.domain_types import Role


class UserCreate(BaseModel):
    """Registration payload."""
    username: str | None = Field(None, max_length=100)
    password: str = Field(min_length=1, max_length=200)
    name: str | None = Field(None, max_length=200)
    role: str = Field(Role.USER.value, min_length=1, max_length=50)
    phone_number: str | None = Field(None, max_length=50)


class UserReplace(BaseModel):
    """Full profile replacement (PUT). Password is replaced only when given."""
    name: str = Field(max_length=200)
    role: str = Field(min_length=1, max_length=50)
    phone_number: str = Field(max_length=50)
    password: str | None = Field(None, min_length=1, max_length=200)


class UserPatch(BaseModel):
    """Partial profile update (PATCH)."""
    name: str | None = Field(None, max_length=200)
    role: str | None = Field(None, min_length=1, max_length=50)
    phone_number: str | None = Field(None, max_length=50)
    password: str | None = Field(None, min_length=1, max_length=200)

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for field in ("role", "password"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    role: str
    username: str


class BalanceTopUp(BaseModel):
    """Saldo top-up; the amount is added to the current balance."""
    saldo: float


class UserResponse(BaseModel):
    """Public user data — redacts password and token."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str | None = None
    role: str
    phone_number: str | None = None
    saldo: float
