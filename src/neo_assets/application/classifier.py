"""Asset classifier.

ONLY MIME type classification - maps a MIME type to an asset kind.
"""

from typing import Optional

from ..core.entities.asset import AssetType


# Checked in order; the first substring found wins
CLASSIFICATION_ORDER = (
    ("image", AssetType.IMAGE),
    ("video", AssetType.VIDEO),
    ("application", AssetType.DOCUMENT),
)


def classify(mimetype: Optional[str]) -> AssetType:
    """Classify a MIME type into an asset kind.

    Substring match, so "image/svg+xml" is an IMAGE and
    "application/x-video" is a VIDEO. Unknown and empty types are OTHER.
    """
    if not mimetype:
        return AssetType.OTHER
    for marker, asset_type in CLASSIFICATION_ORDER:
        if marker in mimetype:
            return asset_type
    return AssetType.OTHER
