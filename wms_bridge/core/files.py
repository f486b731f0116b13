"""
core/files.py
--------------

File inputs accepted by the order template upload.

A CSV template reaches the bridge either as a file already stored on
disk (for instance a multipart upload spooled by the web server) or as
raw bytes held in memory. Callers pick the variant explicitly; the
client never inspects the object to guess which one it got.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class UploadedFile:
    """A file on disk together with the name the client uploaded it under."""

    path: Path
    client_name: str

    @property
    def name(self) -> Optional[str]:
        return self.client_name

    def read(self) -> bytes:
        return Path(self.path).read_bytes()


@dataclass(frozen=True)
class RawBytes:
    """In-memory file content with an optional display name."""

    content: bytes
    name: Optional[str] = None

    @classmethod
    def from_text(cls, text: str, name: Optional[str] = None, encoding: str = "utf-8") -> "RawBytes":
        return cls(content=text.encode(encoding), name=name)

    def read(self) -> bytes:
        return self.content


FileInput = Union[UploadedFile, RawBytes]
