"""Asset ownership scope.

ONLY caller identity - exactly one of a user identity or an admin identity,
resolved at the boundary before any asset operation runs.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class AssetScope:
    """Ownership scope of the caller."""

    user_id: Optional[str] = None
    admin_id: Optional[str] = None

    def __post_init__(self):
        if bool(self.user_id) == bool(self.admin_id):
            raise ValueError("AssetScope requires exactly one of user_id or admin_id")

    @classmethod
    def for_user(cls, user_id: str) -> 'AssetScope':
        return cls(user_id=user_id)

    @classmethod
    def for_admin(cls, admin_id: str) -> 'AssetScope':
        return cls(admin_id=admin_id)

    @classmethod
    def resolve(cls, session_id: Optional[str] = None, admin_id: Optional[str] = None) -> 'AssetScope':
        """Resolve a scope from an authenticated session.

        An admin identity wins over the session user; a plain session
        resolves to the user scope.
        """
        if admin_id:
            return cls(admin_id=admin_id)
        return cls(user_id=session_id)

    @property
    def is_admin(self) -> bool:
        return bool(self.admin_id)

    def as_filter(self) -> Dict[str, str]:
        """Record store filter selecting the assets owned by this scope."""
        if self.is_admin:
            return {"admin_id": self.admin_id}
        return {"user_id": self.user_id}

    def ownership_fields(self) -> Dict[str, Optional[str]]:
        """Ownership columns written on a new asset record."""
        if self.is_admin:
            return {"user_id": None, "admin_id": self.admin_id}
        return {"user_id": self.user_id, "admin_id": None}
