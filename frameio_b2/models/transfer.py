"""Result models for export and import operations."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import ConfigDict, Field

from .assets import ExportEntry
from .base import BridgeBaseModel

STATUS_FULFILLED = "fulfilled"
STATUS_REJECTED = "rejected"


class StoredObject(BridgeBaseModel):
    """
    An object written to the storage bucket.

    Attributes:
        bucket: Bucket name
        key: Object key inside the bucket
        filesize: Declared size in bytes
    """

    bucket: str
    key: str
    filesize: Optional[int] = None


class TransferResult(BridgeBaseModel):
    """
    Settled outcome of one transfer task.

    Exactly one of ``value`` (fulfilled) or ``reason`` (rejected) is set.
    """

    status: Literal["fulfilled", "rejected"]
    value: Optional[StoredObject] = None
    reason: Optional[str] = None

    @classmethod
    def fulfilled(cls, value: StoredObject) -> "TransferResult":
        """Build a successful outcome."""
        return cls(status=STATUS_FULFILLED, value=value)

    @classmethod
    def rejected(cls, reason: str) -> "TransferResult":
        """Build a failed outcome."""
        return cls(status=STATUS_REJECTED, reason=reason)

    @property
    def is_fulfilled(self) -> bool:
        """Check if the transfer succeeded."""
        return self.status == STATUS_FULFILLED


class ExportResult(TransferResult):
    """An export entry merged with its transfer outcome."""

    url: Optional[str] = None
    name: str
    filesize: Optional[int] = None

    @classmethod
    def from_outcome(cls, entry: ExportEntry, outcome: TransferResult) -> "ExportResult":
        """Merge an entry's fields with the outcome of its transfer."""
        return cls(**entry.model_dump(), **outcome.model_dump())

    def to_response(self) -> Dict[str, Any]:
        """Serialize without the unset half of the outcome."""
        return self.model_dump(exclude_none=True)


class ExportSummary(BridgeBaseModel):
    """Counts over a list of export results."""

    total: int = Field(default=0, ge=0)
    fulfilled: int = Field(default=0, ge=0)
    rejected: int = Field(default=0, ge=0)

    @classmethod
    def from_results(cls, results: List[ExportResult]) -> "ExportSummary":
        """Summarize a list of export results."""
        fulfilled = sum(1 for result in results if result.is_fulfilled)
        return cls(total=len(results), fulfilled=fulfilled, rejected=len(results) - fulfilled)

    @property
    def has_failures(self) -> bool:
        """Check if any entry failed."""
        return self.rejected > 0


class ImportRequest(BridgeBaseModel):
    """
    Instruction to pull one storage object into Frame.io.

    Attributes:
        resource_id: Frame.io asset the action was triggered on
        b2path: Object path inside the bucket
        filesize: Declared size in bytes
    """

    resource_id: str
    b2path: str = Field(min_length=1)
    filesize: Optional[int] = Field(default=None, ge=0)


class ImportResult(BridgeBaseModel):
    """Result of an import: the request fields merged with the created asset."""

    model_config = ConfigDict(extra="allow")

    b2path: str
    id: str
    filesize: Optional[int] = None

    def to_response(self) -> Dict[str, Any]:
        """Serialize, keeping every field of the created asset."""
        return self.model_dump()


__all__ = [
    "STATUS_FULFILLED",
    "STATUS_REJECTED",
    "StoredObject",
    "TransferResult",
    "ExportResult",
    "ExportSummary",
    "ImportRequest",
    "ImportResult",
]
