"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict


class EntitySchema(BaseModel):
    """Base for request bodies: enum members are stored as their labels."""
    model_config = ConfigDict(use_enum_values=True, validate_default=True, extra="ignore")
