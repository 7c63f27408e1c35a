"""Base models for frameio-b2."""

from pydantic import BaseModel, ConfigDict


class BridgeBaseModel(BaseModel):
    """Base model for all frameio-b2 domain models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


class FrameioBaseModel(BaseModel):
    """Base model for all Frame.io API payloads."""

    model_config = ConfigDict(extra="allow")  # Allow extra fields from API


__all__ = ["BridgeBaseModel", "FrameioBaseModel"]
