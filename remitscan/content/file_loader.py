import mimetypes
from pathlib import Path

from remitscan.content.models import SourceFile


class FileLoader:
    """Turns filesystem paths into SourceFile objects.

    Bytes are not read here; the normalizer reads them in its worker pool.
    """

    def load(self, path: Path | str) -> SourceFile:
        """Resolve name and MIME type for a file on disk.

        Raises:
            FileNotFoundError: if the path does not exist or is not a file.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        mime_type, _ = mimetypes.guess_type(path.name)
        return SourceFile(name=path.name, mime_type=mime_type or "", path=path)

    def load_many(self, paths: list[Path] | list[str]) -> list[SourceFile]:
        return [self.load(p) for p in paths]
