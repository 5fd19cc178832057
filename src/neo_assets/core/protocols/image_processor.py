"""Image processor protocol.

ONLY image primitives contract - decoding dimensions and resizing, the two
operations the upload orchestration needs for IMAGE assets.
"""

from typing import Any, Awaitable, Union
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.image_metadata import ImageMetadata


@runtime_checkable
class ImageProcessor(Protocol):
    """Image decode/resize capability."""

    def get_image_metadata(
        self, content: bytes
    ) -> Union[ImageMetadata, Awaitable[ImageMetadata], Any]:
        """Decode width, height and format from encoded image bytes."""
        ...

    def resize(self, content: bytes, max_width: int) -> Union[bytes, Awaitable[bytes]]:
        """Resize to at most max_width, preserving aspect ratio.

        Implementations use an "inside" fit and never enlarge the image.
        """
        ...
