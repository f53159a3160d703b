"""Filesystem helpers: sidecar paths and blocking file access."""

from pathlib import Path


def sidecar_path(media_path: Path, extension: str) -> Path:
    """Return the sibling of *media_path* with its extension replaced.

    ``extension`` must start with a dot and may contain more than one
    (e.g. ``.edl.processed``). A media path without an extension simply
    gains one.
    """
    if not extension.startswith("."):
        raise ValueError(f"Extension must start with '.': {extension!r}")
    media_path = Path(media_path)
    return media_path.with_name(media_path.stem + extension)


class LocalFileSystem:
    """Blocking access to the local disk. Errors propagate as OSError."""

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read_all_lines(self, path: Path) -> list[str]:
        # utf-8-sig also accepts plain ASCII and strips a leading BOM
        return Path(path).read_text(encoding="utf-8-sig").splitlines()

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")
