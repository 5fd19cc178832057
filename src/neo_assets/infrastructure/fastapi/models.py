"""Response models for the assets router."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ...core.entities.asset import Asset, AssetType


class AssetResponse(BaseModel):
    """Public representation of an asset record."""

    id: str
    name: str
    url: str
    type: AssetType
    key: Optional[str] = None
    bucket: Optional[str] = None
    region: Optional[str] = None
    filesize: int = 0
    mimetype: Optional[str] = None
    is_private: bool = False
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None
    thumbnail_url: Optional[str] = None
    thumbnail_key: Optional[str] = None
    user_id: Optional[str] = None
    admin_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_asset(cls, asset: Asset) -> "AssetResponse":
        return cls.model_validate(asset, from_attributes=True)


class DeleteAssetResponse(BaseModel):
    success: bool = Field(default=True, description="Whether the asset was removed")
