"""Image metadata value object."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ImageMetadata:
    """Decoded image dimensions and container format."""

    width: Optional[int]
    height: Optional[int]
    format: Optional[str]

    @classmethod
    def coerce(cls, value: Any) -> 'ImageMetadata':
        """Normalize an image capability return value (dataclass or mapping)."""
        if isinstance(value, ImageMetadata):
            return value
        if isinstance(value, Mapping):
            return cls(
                width=value.get("width"),
                height=value.get("height"),
                format=value.get("format"),
            )
        raise ValueError(f"Unsupported image metadata value: {type(value).__name__}")
