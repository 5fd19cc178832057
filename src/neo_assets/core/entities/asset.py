"""Asset entity.

ONLY asset record - the persisted description of one uploaded or registered
file, its storage location and derived metadata.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class AssetType(str, Enum):
    """Asset kinds derived from the MIME type."""
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    DOCUMENT = "DOCUMENT"
    OTHER = "OTHER"


@dataclass
class Asset:
    """Asset metadata record.

    Assets are immutable once created; the only transition is deletion.
    Exactly one of user_id / admin_id is set, taken from the uploader's scope.
    """

    id: str
    name: str
    url: str
    type: AssetType

    # Primary content location; key is None for assets registered by URL
    key: Optional[str] = None
    bucket: Optional[str] = None
    region: Optional[str] = None

    filesize: int = 0
    mimetype: Optional[str] = None
    is_private: bool = False

    # Image-only except format, which non-images take from the MIME subtype
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None

    thumbnail_url: Optional[str] = None
    thumbnail_key: Optional[str] = None

    user_id: Optional[str] = None
    admin_id: Optional[str] = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.type, AssetType):
            self.type = AssetType(self.type)
        if self.filesize is None:
            self.filesize = 0
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=timezone.utc)

    @property
    def is_image(self) -> bool:
        return self.type == AssetType.IMAGE

    @property
    def has_thumbnail(self) -> bool:
        return bool(self.thumbnail_key or self.thumbnail_url)

    def is_owned_by_user(self, user_id: Optional[str]) -> bool:
        return self.user_id is not None and self.user_id == user_id

    def is_owned_by_admin(self, admin_id: Optional[str]) -> bool:
        return self.admin_id is not None and self.admin_id == admin_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert asset to dictionary representation."""
        data = asdict(self)
        data["type"] = self.type.value
        data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Asset':
        """Create Asset from dictionary representation."""
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)

        kwargs = {name: data[name] for name in cls.__dataclass_fields__ if name in data}
        if created_at is not None:
            kwargs["created_at"] = created_at
        else:
            kwargs.pop("created_at", None)
        return cls(**kwargs)
