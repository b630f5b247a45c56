"""Base schemas with common configuration."""
from datetime import datetime, UTC

from pydantic import BaseModel, ConfigDict, field_serializer


def serialize_datetime_utc(dt: datetime) -> str:
    """Serialize a datetime as ISO 8601 UTC with a ``Z`` suffix.

    SQLite stores datetimes as naive strings, so naive values are treated as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat().replace('+00:00', 'Z')


class BaseSchema(BaseModel):
    """Base schema with common configuration for all API responses."""

    model_config = ConfigDict(
        from_attributes=True,
    )

    @field_serializer("*", mode="wrap")
    def serialize_datetimes(self, value, handler):
        """Render datetime fields in UTC before pydantic formats them."""
        if isinstance(value, datetime):
            return serialize_datetime_utc(value)
        return handler(value)
