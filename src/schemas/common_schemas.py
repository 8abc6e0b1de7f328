"""Common schemas used across multiple API endpoints.

Provides the camelCase base model, the JSON money type and the plain
message response.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal values go over the wire as JSON numbers, not strings.
JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class CamelModel(BaseModel):
    """Base schema with camelCase JSON field names.

    Accepts both camelCase and snake_case on input; responses are written
    in camelCase (FastAPI serializes response models by alias).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(BaseModel):
    """Plain message body (logout, auth failures)."""

    message: str = Field(..., description="Human-readable message")
