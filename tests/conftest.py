"""Pytest configuration and fixtures for neo-assets tests."""

import copy
from io import BytesIO
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from neo_assets.config.service import AssetServiceConfig
from neo_assets.core.entities.asset import Asset, AssetType
from neo_assets.core.entities.scope import AssetScope
from neo_assets.core.entities.uploaded_file import UploadedFile
from neo_assets.core.protocols import AssetCapabilities
from neo_assets.core.value_objects.image_metadata import ImageMetadata
from neo_assets.application.notifier import AssetEventNotifier
from neo_assets.application.services.asset_service import AssetService
from neo_assets.utils import generate_uuid_v7


class InMemoryAssetRepository:
    """AssetRepository fake keeping records in a dict."""

    def __init__(self):
        self.records: Dict[str, Asset] = {}

    async def create(self, asset: Asset) -> Asset:
        self.records[asset.id] = copy.deepcopy(asset)
        return copy.deepcopy(asset)

    async def find_many(self, filters: Dict[str, Any]) -> List[Asset]:
        return [
            copy.deepcopy(asset)
            for asset in self.records.values()
            if all(getattr(asset, column) == value for column, value in filters.items())
        ]

    async def find_one(self, asset_id: str) -> Optional[Asset]:
        asset = self.records.get(asset_id)
        return copy.deepcopy(asset) if asset else None

    async def delete(self, asset_id: str) -> None:
        del self.records[asset_id]


def make_image_bytes(width: int = 1024, height: int = 768, fmt: str = "PNG", mode: str = "RGB") -> bytes:
    """Encode a blank image with Pillow."""
    image = Image.new(mode, (width, height))
    output = BytesIO()
    image.save(output, format=fmt)
    return output.getvalue()


def fake_upload_result(content, mimetype, filename, is_private):
    return {
        "url": f"https://cdn.example.com/{filename}",
        "key": f"key/{filename}",
        "bucket": "private-bucket" if is_private else "public-bucket",
        "region": "eu-west-1",
    }


@pytest.fixture
def asset_repository():
    """In-memory asset repository."""
    return InMemoryAssetRepository()


@pytest.fixture
def mock_asset_repository():
    """Mock asset repository for testing."""
    repo = AsyncMock()
    repo.create = AsyncMock(side_effect=lambda asset: asset)
    repo.find_many = AsyncMock(return_value=[])
    repo.find_one = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_upload():
    """Upload capability echoing a CDN url and a key derived from the filename."""
    return AsyncMock(side_effect=fake_upload_result)


@pytest.fixture
def mock_delete():
    return AsyncMock(return_value=None)


@pytest.fixture
def mock_image_processor():
    """Image processor reporting a 1024x768 png."""
    processor = MagicMock()
    processor.get_image_metadata = AsyncMock(
        return_value=ImageMetadata(width=1024, height=768, format="png")
    )
    processor.resize = AsyncMock(return_value=b"thumbnail-bytes")
    return processor


@pytest.fixture
def capabilities(mock_upload, mock_delete, mock_image_processor):
    return AssetCapabilities(
        upload=mock_upload,
        delete=mock_delete,
        image_processor=mock_image_processor,
    )


@pytest.fixture
def service_config():
    return AssetServiceConfig(preview_max_width=512, generate_preview=True)


@pytest.fixture
def notifier():
    return AssetEventNotifier()


@pytest.fixture
def asset_service(asset_repository, capabilities, service_config, notifier):
    """Asset service over the in-memory repository and mock capabilities."""
    return AssetService(
        asset_repository=asset_repository,
        capabilities=capabilities,
        config=service_config,
        notifier=notifier,
    )


@pytest.fixture
def user_scope():
    return AssetScope.for_user("user-1")


@pytest.fixture
def other_user_scope():
    return AssetScope.for_user("user-2")


@pytest.fixture
def admin_scope():
    return AssetScope.for_admin("admin-1")


@pytest.fixture
def other_admin_scope():
    return AssetScope.for_admin("admin-2")


@pytest.fixture
def png_bytes():
    return make_image_bytes(1024, 768, "PNG")


@pytest.fixture
def image_file(png_bytes):
    """Sample PNG upload."""
    return UploadedFile(
        mimetype="image/png",
        content=png_bytes,
        filename="photo.png",
        filesize=len(png_bytes),
    )


@pytest.fixture
def document_file():
    """Sample PDF upload."""
    return UploadedFile(
        mimetype="application/pdf",
        content=b"%PDF-1.4 sample",
        filename="report.pdf",
        filesize=15,
    )


@pytest.fixture
def hosted_file():
    """Sample pre-hosted video."""
    return UploadedFile(
        mimetype="video/mp4",
        filename="clip.mp4",
        filesize=2048,
        url="https://videos.example.com/clip.mp4",
        bucket="external",
        region="us-east-2",
    )


@pytest.fixture
def sample_asset():
    """Sample asset owned by user-1 with a thumbnail."""
    return Asset(
        id=generate_uuid_v7(),
        name="photo.png",
        url="https://cdn.example.com/photo.png",
        type=AssetType.IMAGE,
        key="key/photo.png",
        bucket="public-bucket",
        region="eu-west-1",
        filesize=1234,
        mimetype="image/png",
        width=1024,
        height=768,
        format="png",
        thumbnail_url="https://cdn.example.com/photo.png-thumbnail",
        thumbnail_key="key/photo.png-thumbnail",
        user_id="user-1",
    )


@pytest.fixture
def image_factory():
    """Callable producing encoded images of a given size and format."""
    return make_image_bytes
