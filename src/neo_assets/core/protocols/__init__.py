"""Asset management protocols."""

from dataclasses import dataclass
from typing import Optional

from .storage import UploadBinary, DeleteBinary
from .image_processor import ImageProcessor
from .asset_repository import AssetRepository


@dataclass(frozen=True)
class AssetCapabilities:
    """Host-supplied capabilities, fixed for the lifetime of a service.

    Every capability is optional; operations needing a missing one fail
    with CapabilityMissing instead of raising to the caller.
    """

    upload: Optional[UploadBinary] = None
    delete: Optional[DeleteBinary] = None
    image_processor: Optional[ImageProcessor] = None


__all__ = [
    "AssetCapabilities",
    "UploadBinary",
    "DeleteBinary",
    "ImageProcessor",
    "AssetRepository",
]
