"""Assets router.

ONLY HTTP binding - exposes list, upload, get and delete over FastAPI.
Authentication is the host's concern: it supplies a dependency returning
the caller's AssetScope.
"""

import logging
from typing import Callable, List, Literal, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import JSONResponse

from ...application.services.asset_service import AssetService
from ...core.entities.scope import AssetScope
from ...core.entities.uploaded_file import UploadedFile
from ...core.exceptions import AssetNotFound, PermissionDenied, create_error_response
from .models import AssetResponse, DeleteAssetResponse

logger = logging.getLogger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"


async def to_uploaded_file(upload: UploadFile) -> UploadedFile:
    """Read a multipart part into an UploadedFile."""
    content = await upload.read()
    return UploadedFile(
        mimetype=upload.content_type or DEFAULT_MIMETYPE,
        content=content,
        filename=upload.filename,
        filesize=upload.size if upload.size is not None else len(content),
    )


def create_assets_router(
    service: AssetService,
    get_scope: Callable[..., AssetScope],
    prefix: str = "/assets",
    tags: Optional[List[str]] = None
) -> APIRouter:
    """Create the assets router.

    Args:
        service: Asset service handling every request
        get_scope: FastAPI dependency resolving the caller's scope
        prefix: Route prefix
        tags: OpenAPI tags

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix=prefix, tags=tags or ["Assets"])

    @router.get(
        "/me",
        response_model=List[AssetResponse],
        summary="List my assets",
        description="List every asset owned by the calling user or admin"
    )
    async def list_my_assets(scope: AssetScope = Depends(get_scope)) -> List[AssetResponse]:
        assets = await service.get_by(scope)
        return [AssetResponse.from_asset(asset) for asset in assets]

    @router.post(
        "/upload/{visibility}",
        response_model=List[AssetResponse],
        summary="Upload assets",
        description="Upload files as private or public assets; failed files are omitted"
    )
    async def upload_assets(
        visibility: Literal["private", "public"],
        files: List[UploadFile] = File(...),
        scope: AssetScope = Depends(get_scope)
    ) -> List[AssetResponse]:
        uploaded = [await to_uploaded_file(upload) for upload in files]
        assets = await service.upload_files(scope, uploaded, is_private=visibility == "private")
        if len(assets) < len(uploaded):
            logger.warning(f"{len(uploaded) - len(assets)} of {len(uploaded)} uploads failed")
        return [AssetResponse.from_asset(asset) for asset in assets]

    @router.get(
        "/single/{asset_id}",
        response_model=AssetResponse,
        summary="Get asset",
        responses={status.HTTP_401_UNAUTHORIZED: {"description": "Asset not found"}}
    )
    async def get_asset(asset_id: str, scope: AssetScope = Depends(get_scope)):
        asset = await service.get_by_id(asset_id, scope)
        if asset is None:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=create_error_response(AssetNotFound(asset_id)),
            )
        return AssetResponse.from_asset(asset)

    @router.delete(
        "/{asset_id}",
        response_model=DeleteAssetResponse,
        summary="Delete asset",
        responses={status.HTTP_401_UNAUTHORIZED: {"description": "Asset not found or access denied"}}
    )
    async def delete_asset(asset_id: str, scope: AssetScope = Depends(get_scope)):
        result = await service.delete_asset_result(scope, asset_id)
        if not result.success:
            error = (
                PermissionDenied(asset_id)
                if result.error_code == "PERMISSION_DENIED"
                else AssetNotFound(asset_id)
            )
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content=create_error_response(error),
            )
        return DeleteAssetResponse(success=True)

    return router
