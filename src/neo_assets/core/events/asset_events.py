"""Asset domain events.

The two notifications downstream collaborators can observe: an asset was
uploaded, and an asset is about to be deleted.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..entities.asset import Asset
from ..entities.uploaded_file import UploadedFile
from ..value_objects.storage_result import StorageResult


@dataclass(frozen=True)
class AssetUploaded:
    """Published after an asset record was persisted."""

    file: UploadedFile
    is_private: bool
    storage_result: StorageResult
    asset: Optional[Asset] = None
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    event_type = "asset.uploaded"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "file_id": self.file.id,
            "filename": self.file.filename,
            "is_private": self.is_private,
            "storage_result": self.storage_result.to_dict(),
            "asset_id": self.asset.id if self.asset else None,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class AssetDeleting:
    """Published before the primary binary of an asset is deleted."""

    asset_id: str
    is_private: bool
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    event_type = "asset.deleting"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "asset_id": self.asset_id,
            "is_private": self.is_private,
            "occurred_at": self.occurred_at.isoformat(),
        }
