"""DTOs for storage uploads (no dependency on HTTP or SDK types)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UploadRequest:
    """One in-memory file to store: bytes, client file name and MIME type.

    Built per incoming multipart part and discarded once the sink call returns.
    """

    data: bytes
    original_name: str
    mime_type: str = "application/octet-stream"

    @property
    def size(self) -> int:
        return len(self.data)
