"""Models for inbound Frame.io custom action callbacks."""

from typing import Any, Dict, Optional

from pydantic import Field

from ..exceptions import DialogueError
from .base import FrameioBaseModel
from .transfer import ImportRequest


class ResourceRef(FrameioBaseModel):
    """The asset a custom action was triggered on."""

    id: str
    type: Optional[str] = None


class CallbackRequest(FrameioBaseModel):
    """
    Body of a custom action callback.

    Attributes:
        type: Declared action type (``import-export``, ``export`` or ``import``)
        data: Answers submitted with the latest form, if any
        resource: Asset the action was triggered on
        filesize: Declared size of the object to import
    """

    type: str = ""
    data: Optional[Dict[str, Any]] = None
    resource: ResourceRef
    filesize: Optional[int] = Field(default=None, ge=0)

    def to_import_request(self) -> ImportRequest:
        """Build the import instruction carried by this callback."""
        b2path = (self.data or {}).get("b2path")
        if not b2path:
            raise DialogueError("Import requested without a b2path")
        return ImportRequest(resource_id=self.resource.id, b2path=b2path, filesize=self.filesize)


__all__ = ["ResourceRef", "CallbackRequest"]
