"""Storage result value object.

ONLY storage location - the answer of the binary upload capability:
where the uploaded bytes now live.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class StorageResult:
    """Location of a stored binary object."""

    url: Optional[str]
    key: Optional[str] = None
    bucket: Optional[str] = None
    region: Optional[str] = None

    @property
    def has_url(self) -> bool:
        return bool(self.url)

    @classmethod
    def coerce(cls, value: Any) -> Optional['StorageResult']:
        """Normalize a capability return value.

        Accepts a StorageResult, a mapping with url/key/bucket/region keys,
        or None. Anything else is treated as "no result".
        """
        if value is None:
            return None
        if isinstance(value, StorageResult):
            return value
        if isinstance(value, Mapping):
            return cls(
                url=value.get("url"),
                key=value.get("key"),
                bucket=value.get("bucket"),
                region=value.get("region"),
            )
        return None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "url": self.url,
            "key": self.key,
            "bucket": self.bucket,
            "region": self.region,
        }
