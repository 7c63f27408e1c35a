"""Models for Frame.io custom action form responses."""

from typing import Any, Dict, List, Literal, Optional

from .base import BridgeBaseModel


class FormOption(BridgeBaseModel):
    """A single choice of a ``select`` field."""

    name: str
    value: str


class FormField(BridgeBaseModel):
    """
    A form field shown to the user.

    Attributes:
        type: Field widget, ``select`` or ``text``
        label: Label displayed next to the field
        name: Key under which the answer is submitted
        options: Choices for ``select`` fields
    """

    type: Literal["select", "text"]
    label: str
    name: str
    options: Optional[List[FormOption]] = None


class FormDescriptor(BridgeBaseModel):
    """A question returned to Frame.io in answer to a callback."""

    title: str
    description: str
    fields: List[FormField]

    def to_response(self) -> Dict[str, Any]:
        """Serialize to the JSON body expected by Frame.io."""
        return self.model_dump(exclude_none=True)

    @property
    def field_names(self) -> List[str]:
        """Names of the fields asked by this form."""
        return [field.name for field in self.fields]


__all__ = ["FormOption", "FormField", "FormDescriptor"]
