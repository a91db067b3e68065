"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    Decisions, claims and rate-limit records are all value objects.
    """

    model_config = ConfigDict(frozen=True)
