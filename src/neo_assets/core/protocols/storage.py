"""Binary storage capability protocols.

ONLY storage contract - the two functions a host injects to put bytes into
and remove bytes from its object store. The core ships no implementation.
"""

from typing import Any, Awaitable, Optional, Union
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.storage_result import StorageResult


@runtime_checkable
class UploadBinary(Protocol):
    """Upload capability.

    May be a plain function or a coroutine function. Returning None, or a
    result without ``url``, means the upload failed.
    """

    def __call__(
        self,
        content: bytes,
        mimetype: str,
        filename: str,
        is_private: bool,
    ) -> Union[Optional[StorageResult], Awaitable[Optional[StorageResult]], Any]:
        ...


@runtime_checkable
class DeleteBinary(Protocol):
    """Delete capability. Raises on failure."""

    def __call__(self, key: str, is_private: bool) -> Union[None, Awaitable[None]]:
        ...
