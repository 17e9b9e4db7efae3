import mimetypes
from collections.abc import Iterable
from pathlib import Path

from app.pipeline.models import SourceFile

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


class FileLoader:
    """Reads local files into SourceFile objects for intake."""

    def load(self, path: Path) -> SourceFile:
        """Read a file's bytes and describe it like a browser file selection.

        The media type is guessed from the file extension and the timestamp
        is the modification time in milliseconds.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        media_type, _ = mimetypes.guess_type(path.name)
        return SourceFile(
            name=path.name,
            last_modified=int(path.stat().st_mtime * 1000),
            media_type=media_type or _FALLBACK_MEDIA_TYPE,
            payload=path.read_bytes(),
        )

    def load_all(self, paths: Iterable[Path]) -> list[SourceFile]:
        return [self.load(path) for path in paths]
