"""Service configuration passed to the asset orchestration at construction."""

from dataclasses import dataclass
from enum import Enum


class AdminDeletePolicy(str, Enum):
    """Which admin scopes may delete an asset."""
    OWNER = "owner"  # only the admin recorded as the asset owner
    ANY = "any"      # any admin identity


@dataclass(frozen=True)
class AssetServiceConfig:
    """Read-only orchestration settings.

    Attributes:
        preview_max_width: Maximum thumbnail width in pixels
        generate_preview: Whether IMAGE uploads get a thumbnail
        admin_delete_policy: Admin authorization rule for deletion
    """

    preview_max_width: int = 512
    generate_preview: bool = True
    admin_delete_policy: AdminDeletePolicy = AdminDeletePolicy.OWNER

    def __post_init__(self):
        if self.preview_max_width <= 0:
            raise ValueError("preview_max_width must be positive")
        if not isinstance(self.admin_delete_policy, AdminDeletePolicy):
            object.__setattr__(self, "admin_delete_policy", AdminDeletePolicy(self.admin_delete_policy))
