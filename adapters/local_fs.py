"""Adapter: LocalFileSystem implements FileSystemPort.

Report sources and summary documents are addressed relative to the project
root; absolute paths (``RESULTS_PATH`` overrides, ``--output``) pass through
unchanged because joining an absolute path onto the root yields the path.
"""

from __future__ import annotations

from pathlib import Path

ENCODING = "utf-8"


class LocalFileSystem:
    """FileSystemPort over the local disk.

    Args:
        base_dir: Project root that relative report paths are read from.
    """

    def __init__(self, base_dir: str) -> None:
        self._root = Path(base_dir).resolve()

    def _path(self, path: str) -> Path:
        return self._root / path

    def read_file(self, path: str) -> str:
        """Return the text of *path*; raises FileNotFoundError when absent."""
        return self._path(path).read_text(encoding=ENCODING)

    def write_file(self, path: str, content: str) -> None:
        """Write *content* to *path*, creating missing directories."""
        target = self._path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding=ENCODING)

    def file_exists(self, path: str) -> bool:
        """True only for regular files; a directory named like a report is absent."""
        return self._path(path).is_file()
