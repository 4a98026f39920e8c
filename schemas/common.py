from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from typing import Annotated
import re
import random
import string


def utcnow() -> datetime:
    """Current time as naive UTC, the form MongoDB hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UTCDateTime = Annotated[datetime, AfterValidator(to_naive_utc)]


def reject_null(value):
    """For partial updates: a field may be left out, but not set to null."""
    if value is None:
        raise ValueError("must not be null")
    return value


class SalonModel(BaseModel):
    """Base model: snake_case in MongoDB, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


def generate_id(prefix: str, name: str, length: int = 4) -> str:
    # Remove special characters and spaces from name
    clean_name = re.sub(r'[^a-zA-Z0-9]', '', name or '')

    # Take first 3 characters of the name (or pad with 'X' if shorter)
    name_part = clean_name[:3].upper().ljust(3, 'X')

    random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))

    return f"{prefix}{name_part}{random_part}"
