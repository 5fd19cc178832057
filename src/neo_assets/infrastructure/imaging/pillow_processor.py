"""Pillow image processor.

ONLY image primitives - decodes dimensions/format and produces width-bounded
thumbnails. SVG documents are rasterized with cairosvg first. Pillow is
blocking, so work runs in a worker thread.
"""

import asyncio
import logging
import re
from io import BytesIO
from typing import Optional

from PIL import Image

from ...core.value_objects.image_metadata import ImageMetadata

logger = logging.getLogger(__name__)

# Formats Pillow decodes but should re-encode under another name
SAVE_FORMAT_ALIASES = {
    "MPO": "JPEG",
}

# Used when Pillow can read the source format but has no writer for it
FALLBACK_SAVE_FORMAT = "PNG"

# Modes JPEG cannot store
NON_JPEG_MODES = ("RGBA", "LA", "P", "PA", "CMYK", "I;16")

# Modes PNG can store
PNG_MODES = ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA")

_SVG_ROOT = re.compile(rb"<svg[\s>]", re.IGNORECASE)


def is_svg(content: bytes) -> bool:
    """True when the leading bytes hold an SVG root element."""
    head = content[:2048].lstrip()
    return head.startswith((b"<svg", b"<?xml", b"<!DOCTYPE svg", b"<!--")) and bool(_SVG_ROOT.search(head))


def rasterize_svg(content: bytes, output_width: Optional[int] = None) -> bytes:
    """Render an SVG document to PNG bytes."""
    import cairosvg

    return cairosvg.svg2png(bytestring=content, output_width=output_width)


def save_format_for(source_format: Optional[str]) -> str:
    save_format = SAVE_FORMAT_ALIASES.get(source_format, source_format) if source_format else None
    Image.init()
    if save_format not in Image.SAVE:
        return FALLBACK_SAVE_FORMAT
    return save_format


class PillowImageProcessor:
    """ImageProcessor implementation backed by Pillow."""

    def __init__(self, resample: Image.Resampling = Image.Resampling.LANCZOS, jpeg_quality: int = 85):
        self._resample = resample
        self._jpeg_quality = jpeg_quality

    async def get_image_metadata(self, content: bytes) -> ImageMetadata:
        return await asyncio.to_thread(self.read_metadata, content)

    async def resize(self, content: bytes, max_width: int) -> bytes:
        return await asyncio.to_thread(self.resize_sync, content, max_width)

    def read_metadata(self, content: bytes) -> ImageMetadata:
        """Decode width, height and lower-case format name.

        SVG reports the size it renders at and the format ``svg``.
        """
        if is_svg(content):
            with Image.open(BytesIO(rasterize_svg(content))) as image:
                return ImageMetadata(width=image.width, height=image.height, format="svg")

        with Image.open(BytesIO(content)) as image:
            return ImageMetadata(
                width=image.width,
                height=image.height,
                format=image.format.lower() if image.format else None,
            )

    def resize_sync(self, content: bytes, max_width: int) -> bytes:
        """Fit the image inside max_width, keeping aspect ratio.

        ``Image.thumbnail`` never enlarges, so images narrower than
        max_width keep their size and are only re-encoded. SVG and formats
        Pillow cannot write come back as PNG.
        """
        if max_width <= 0:
            raise ValueError("max_width must be positive")

        if is_svg(content):
            content = rasterize_svg(content)

        with Image.open(BytesIO(content)) as image:
            source_format = image.format
            save_format = save_format_for(source_format)

            image.thumbnail((max_width, image.height), self._resample)

            if save_format == "JPEG" and image.mode in NON_JPEG_MODES:
                image = image.convert("RGB")
            elif save_format == "PNG" and image.mode not in PNG_MODES:
                image = image.convert("RGBA")

            output = BytesIO()
            save_kwargs = {"quality": self._jpeg_quality} if save_format == "JPEG" else {}
            image.save(output, format=save_format, **save_kwargs)

        logger.debug(f"Resized {source_format} image to {save_format} with width <= {max_width}")
        return output.getvalue()


def create_pillow_image_processor() -> PillowImageProcessor:
    """Create Pillow image processor."""
    return PillowImageProcessor()
