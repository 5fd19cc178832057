"""Asset identifier value object.

ONLY asset identifier - represents unique asset ID using UUIDv7 for
time-ordered database indexes.
"""

from dataclasses import dataclass
from uuid import UUID

from ...utils import generate_uuid_v7


@dataclass(frozen=True)
class AssetId:
    """Asset identifier value object.

    Immutable and hashable for use as dictionary keys and in sets.
    """

    value: UUID

    def __post_init__(self):
        """Validate asset ID format."""
        if not isinstance(self.value, UUID):
            raise ValueError(f"AssetId must be a UUID, got {type(self.value).__name__}")

    @classmethod
    def generate(cls) -> 'AssetId':
        """Generate a new time-ordered asset ID using UUIDv7."""
        return cls(UUID(generate_uuid_v7()))

    @classmethod
    def from_string(cls, value: str) -> 'AssetId':
        """Create AssetId from string representation."""
        try:
            return cls(UUID(value))
        except (ValueError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid asset ID format: {value}") from e

    def to_string(self) -> str:
        """Get string representation of asset ID."""
        return str(self.value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"AssetId('{self.value}')"
