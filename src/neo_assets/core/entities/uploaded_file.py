"""Uploaded file payload.

ONLY validated file payload - what the transport layer hands the core after
multipart parsing and size checks.
"""

from dataclasses import dataclass, field
from typing import Optional

from ...utils import generate_uuid_v7


@dataclass
class UploadedFile:
    """A file ready for ingestion.

    A payload carrying ``url`` describes an already-hosted object that is
    registered without uploading bytes.
    """

    mimetype: str
    content: bytes = b""
    filename: Optional[str] = None
    filesize: Optional[int] = None
    id: str = field(default_factory=generate_uuid_v7)

    # Pre-hosted object
    url: Optional[str] = None
    bucket: Optional[str] = None
    region: Optional[str] = None

    @property
    def is_hosted(self) -> bool:
        return bool(self.url)

    @property
    def subtype(self) -> Optional[str]:
        """MIME subtype, e.g. 'pdf' for 'application/pdf'."""
        if not self.mimetype or "/" not in self.mimetype:
            return None
        return self.mimetype.split("/", 1)[1] or None
