"""Tests for the Pillow image processor."""

from io import BytesIO

import pytest
from PIL import Image, UnidentifiedImageError

from neo_assets.core.value_objects.image_metadata import ImageMetadata
from neo_assets.infrastructure.imaging.pillow_processor import PillowImageProcessor, is_svg


def decode(content):
    with Image.open(BytesIO(content)) as image:
        return image.size, image.format


class TestPillowImageProcessor:
    """Test metadata decoding and bounded resizing."""

    @pytest.fixture
    def processor(self):
        return PillowImageProcessor()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fmt,expected", [("PNG", "png"), ("JPEG", "jpeg"), ("GIF", "gif"), ("WEBP", "webp")])
    async def test_metadata(self, processor, image_factory, fmt, expected):
        content = image_factory(120, 80, fmt)

        meta = await processor.get_image_metadata(content)

        assert meta == ImageMetadata(width=120, height=80, format=expected)

    @pytest.mark.asyncio
    async def test_metadata_rejects_non_image(self, processor):
        with pytest.raises(UnidentifiedImageError):
            await processor.get_image_metadata(b"definitely not an image")

    @pytest.mark.asyncio
    async def test_resize_keeps_aspect_ratio(self, processor, image_factory):
        resized = await processor.resize(image_factory(1000, 500, "PNG"), 200)

        assert decode(resized) == ((200, 100), "PNG")

    @pytest.mark.asyncio
    async def test_resize_never_enlarges(self, processor, image_factory):
        resized = await processor.resize(image_factory(100, 50, "JPEG"), 400)

        assert decode(resized) == ((100, 50), "JPEG")

    @pytest.mark.asyncio
    async def test_resize_rgba_png(self, processor, image_factory):
        resized = await processor.resize(image_factory(300, 300, "PNG", mode="RGBA"), 150)

        assert decode(resized) == ((150, 150), "PNG")

    def test_resize_rejects_non_positive_width(self, processor, image_factory):
        with pytest.raises(ValueError):
            processor.resize_sync(image_factory(10, 10, "PNG"), 0)

    @pytest.mark.asyncio
    async def test_unwritable_format_resized_to_png(self, processor, image_factory, monkeypatch):
        Image.init()
        monkeypatch.delitem(Image.SAVE, "GIF")

        resized = await processor.resize(image_factory(400, 200, "GIF"), 100)

        assert decode(resized) == ((100, 50), "PNG")


SVG_DOCUMENT = (
    b'<?xml version="1.0" encoding="UTF-8"?>\n'
    b'<svg xmlns="http://www.w3.org/2000/svg" width="800" height="600">'
    b'<rect width="800" height="600" fill="#3366cc"/></svg>'
)


@pytest.fixture
def cairosvg():
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        pytest.skip(f"cairosvg unavailable: {e}")
    return cairosvg


class TestSvgImages:
    """Test SVG rasterization ahead of Pillow decoding."""

    @pytest.fixture
    def processor(self, cairosvg):
        return PillowImageProcessor()

    @pytest.mark.parametrize("content,expected", [
        (SVG_DOCUMENT, True),
        (b'<svg xmlns="http://www.w3.org/2000/svg"/>', True),
        (b'<?xml version="1.0"?><feed></feed>', False),
        (b"\x89PNG\r\n", False),
    ])
    def test_is_svg(self, content, expected):
        assert is_svg(content) is expected

    @pytest.mark.asyncio
    async def test_metadata(self, processor):
        meta = await processor.get_image_metadata(SVG_DOCUMENT)

        assert meta == ImageMetadata(width=800, height=600, format="svg")

    @pytest.mark.asyncio
    async def test_resize_outputs_png(self, processor):
        resized = await processor.resize(SVG_DOCUMENT, 200)

        assert decode(resized) == ((200, 150), "PNG")
