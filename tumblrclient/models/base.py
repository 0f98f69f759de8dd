"""Base model for Tumblr API entities."""

from pydantic import BaseModel, ConfigDict


class BaseTumblrModel(BaseModel):
    """Base model for Tumblr API entities.

    Entities are built only by decoding API responses and are never
    mutated afterwards. Fields the API adds over time are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
