from pydantic import EmailStr, Field, SecretStr, field_validator
from typing import Literal, Optional
from datetime import datetime
from schemas.common import SalonModel, generate_id, reject_null, utcnow

Role = Literal["user", "admin", "owner", "therapist", "manager"]
EmploymentType = Literal["employed", "self-employed"]

MIN_PASSWORD_LENGTH = 6


def check_password_length(value: SecretStr) -> SecretStr:
    if len(value.get_secret_value()) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    return value


def clean_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Name cannot be empty")
    return value


class UserBase(SalonModel):
    username: str = Field(min_length=1)
    email: EmailStr
    name: str = Field(min_length=1)
    role: Role = "user"
    active: bool = True
    employment_type: Optional[EmploymentType] = None
    hourly_rate: Optional[float] = Field(None, ge=0)

    @field_validator("username", "email", mode="before")
    @classmethod
    def normalize_identity(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return clean_name(value)


class UserCreate(UserBase):
    password: SecretStr

    @field_validator("password")
    @classmethod
    def password_length(cls, value: SecretStr) -> SecretStr:
        return check_password_length(value)


class UserUpdate(SalonModel):
    username: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    role: Optional[Role] = None
    active: Optional[bool] = None
    employment_type: Optional[EmploymentType] = None
    hourly_rate: Optional[float] = Field(None, ge=0)
    password: Optional[SecretStr] = None

    @field_validator("password")
    @classmethod
    def password_length(cls, value: Optional[SecretStr]) -> Optional[SecretStr]:
        if value is None:
            return value
        return check_password_length(value)

    @field_validator("username", "email", mode="before")
    @classmethod
    def normalize_identity(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("username", "email", "role", "active")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> str:
        return clean_name(reject_null(value))


class User(UserBase):
    """A user as returned to callers; never carries the password hash."""
    user_id: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


def generate_user_id(name: str) -> str:
    return generate_id("US", name)
