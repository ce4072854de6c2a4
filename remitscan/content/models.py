from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceFile:
    """An input document, backed by a filesystem path or by in-memory bytes."""

    name: str
    mime_type: str = ""
    path: Path | None = None
    data: bytes | None = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.data is None):
            raise ValueError("SourceFile needs exactly one of 'path' or 'data'")

    @property
    def suffix(self) -> str:
        return Path(self.name).suffix.lower()

    @property
    def size(self) -> int:
        if self.data is not None:
            return len(self.data)
        assert self.path is not None
        return self.path.stat().st_size

    def read_bytes(self) -> bytes:
        if self.data is not None:
            return self.data
        assert self.path is not None
        return self.path.read_bytes()


@dataclass(frozen=True)
class TextContent:
    """Plain text ready to be sent to the extraction backend."""

    text: str


@dataclass(frozen=True)
class BinaryContent:
    """Base64 payload plus its MIME type."""

    data: str
    mime_type: str


ContentUnit = TextContent | BinaryContent
