"""Asset operation exceptions.

One class per failure kind of the upload/deletion orchestration. Commands
raise these internally and convert them into failure results; none of them
crosses the AssetService boundary.
"""

from typing import Any, Dict, Optional

from .base import NeoAssetsError


class CapabilityMissing(NeoAssetsError):
    """An injected capability (storage, image processing) was never configured."""

    def __init__(self, capability: str, details: Optional[Dict[str, Any]] = None):
        enhanced_details = details or {}
        enhanced_details["capability"] = capability
        super().__init__(
            message=f"Capability '{capability}' is not configured",
            error_code="CAPABILITY_MISSING",
            details=enhanced_details,
        )
        self.capability = capability


class CapabilityFailed(NeoAssetsError):
    """An injected capability raised while performing its work."""

    def __init__(
        self,
        capability: str,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        enhanced_details = details or {}
        enhanced_details["capability"] = capability
        if cause is not None:
            enhanced_details["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(
            message=f"Capability '{capability}' failed",
            error_code="CAPABILITY_FAILED",
            details=enhanced_details,
        )
        self.capability = capability
        self.cause = cause


class UploadFailed(NeoAssetsError):
    """Raised when a binary upload produced no usable result."""

    def __init__(
        self,
        message: str,
        filename: Optional[str] = None,
        upload_stage: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        enhanced_details = details or {}
        if filename:
            enhanced_details["filename"] = filename
        if upload_stage:
            enhanced_details["upload_stage"] = upload_stage
        super().__init__(
            message=message,
            error_code="UPLOAD_FAILED",
            details=enhanced_details,
        )
        self.filename = filename
        self.upload_stage = upload_stage


class AssetNotFound(NeoAssetsError):
    """Raised when no asset exists for the identifier (or it is out of scope)."""

    def __init__(self, asset_id: str):
        super().__init__(
            message=f"Asset {asset_id} not found",
            error_code="ASSET_NOT_FOUND",
            details={"asset_id": asset_id},
        )
        self.asset_id = asset_id


class PermissionDenied(NeoAssetsError):
    """Raised when the caller scope may not mutate the asset."""

    def __init__(self, asset_id: str, scope: Optional[Dict[str, str]] = None):
        details: Dict[str, Any] = {"asset_id": asset_id}
        if scope:
            details["scope"] = scope
        super().__init__(
            message=f"Access to asset {asset_id} denied",
            error_code="PERMISSION_DENIED",
            details=details,
        )
        self.asset_id = asset_id


class PersistenceError(NeoAssetsError):
    """Raised when the record store failed."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        details: Dict[str, Any] = {"operation": operation}
        if cause is not None:
            details["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(
            message=f"Asset persistence failed during {operation}",
            error_code="PERSISTENCE_FAILED",
            details=details,
        )
        self.operation = operation
        self.cause = cause
