"""Pydantic models for API request/response."""

from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from domain.model.user import Phone, User

# e.g. "Jan 05, 2026 03:04:05 PM"
TIMESTAMP_FORMAT = "%b %d, %Y %I:%M:%S %p"

# Stored as 64-bit and 32-bit signed integers
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1


class PhoneModel(BaseModel):
    """Phone number as sent and returned by the API."""
    model_config = ConfigDict(populate_by_name=True)

    number: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Phone number")
    city_code: int = Field(
        ...,
        ge=INT32_MIN,
        le=INT32_MAX,
        validation_alias=AliasChoices("cityCode", "citycode", "city_code"),
        serialization_alias="cityCode",
        description="City code",
    )
    country_code: str = Field(
        ...,
        min_length=1,
        max_length=5,
        validation_alias=AliasChoices("countryCode", "contrycode", "country_code"),
        serialization_alias="countryCode",
        description="Country code",
    )

    def to_domain(self) -> Phone:
        return Phone(number=self.number, city_code=self.city_code, country_code=self.country_code)

    @classmethod
    def from_domain(cls, phone: Phone) -> "PhoneModel":
        return cls(number=phone.number, city_code=phone.city_code, country_code=phone.country_code)


class SignUpRequest(BaseModel):
    """Request model for user registration. Email and password policy is enforced by the service."""
    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="User email")
    password: str = Field(..., description="Plain text password")
    phones: Optional[list[PhoneModel]] = Field(None, description="Phone numbers, order preserved")


class UserResponse(BaseModel):
    """Response model for sign-up and login."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="User ID")
    name: Optional[str] = Field(None, description="Display name")
    email: str = Field(..., description="User email")
    password: Optional[str] = Field(None, description="Password hash")
    created: str = Field(..., description="Registration timestamp")
    last_login: Optional[str] = Field(None, alias="lastLogin", description="Last login timestamp")
    active: bool = Field(..., alias="isActive", description="Whether the account is active")
    token: str = Field(..., description="Bearer token for the next login")
    phones: list[PhoneModel] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, user: User, token: str, expose_password_hash: bool = True) -> "UserResponse":
        fields = dict(
            id=user.id,
            name=user.name,
            email=user.email,
            created=user.created.strftime(TIMESTAMP_FORMAT),
            last_login=user.last_login.strftime(TIMESTAMP_FORMAT) if user.last_login else None,
            active=user.active,
            token=token,
            phones=[PhoneModel.from_domain(p) for p in user.phones],
        )
        if expose_password_hash:
            fields["password"] = user.password_hash
        return cls(**fields)


class ErrorDetail(BaseModel):
    """Single error entry."""
    timestamp: str
    code: int
    detail: str


class ErrorResponse(BaseModel):
    """Error body: exactly one entry per failure."""
    error: list[ErrorDetail]
