"""Upload assets command.

ONLY batch ingestion - applies the single-asset upload to a list of files
one at a time, keeping the successes in their original order.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ...core.entities.asset import Asset
from ...core.entities.scope import AssetScope
from ...core.entities.uploaded_file import UploadedFile
from .upload_asset import UploadAssetCommand, UploadAssetData, UploadAssetResult

logger = logging.getLogger(__name__)


@dataclass
class UploadAssetsData:
    """Data required to upload a batch of files."""

    scope: AssetScope
    files: Sequence[UploadedFile]
    is_private: bool = False


@dataclass
class UploadAssetsResult:
    """Result of a batch upload. The batch itself always succeeds."""

    assets: List[Asset] = field(default_factory=list)
    failed: List[UploadAssetResult] = field(default_factory=list)

    @property
    def uploaded_count(self) -> int:
        return len(self.assets)

    @property
    def failed_count(self) -> int:
        return len(self.failed)


class UploadAssetsCommand:
    """Command to upload several files sequentially.

    Files are processed one after another so that only one file buffer and
    one outbound storage request are in flight per batch.
    """

    def __init__(self, upload_command: UploadAssetCommand):
        self._upload_command = upload_command

    async def execute(self, data: UploadAssetsData) -> UploadAssetsResult:
        result = UploadAssetsResult()

        for file in data.files:
            outcome = await self._upload_command.execute(
                UploadAssetData(scope=data.scope, file=file, is_private=data.is_private)
            )
            if outcome.success and outcome.asset is not None:
                result.assets.append(outcome.asset)
            else:
                result.failed.append(outcome)

        if result.failed:
            logger.warning(
                f"Batch upload finished with {result.failed_count} failure(s) "
                f"out of {len(data.files)} file(s)"
            )
        return result


def create_upload_assets_command(upload_command: UploadAssetCommand) -> UploadAssetsCommand:
    """Create upload assets command."""
    return UploadAssetsCommand(upload_command)
