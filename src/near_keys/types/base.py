"""Reusable, strict base model for key values."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    Field names are converted to camel case when serializing by alias:
    the field `key_type` is written as `keyType`, which is the field naming
    other clients use for the same values.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        arbitrary_types_allowed=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )
