"""Filesystem operations for Scala source files.

Pure name rules live in :mod:`scalanew.domain`. This module handles actual
file I/O, path resolution, and package-directory discovery.
"""

from __future__ import annotations

from pathlib import Path

SOURCE_EXTENSION = ".scala"

# Tool directories (".git", ".metals", ...) are never packages.
_HIDDEN_PREFIX = "."
_PATH_SEPARATORS = ("/", "\\")


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def relative_source_path(qualified_name: str) -> str:
    """Return the folder-relative file path for a qualified name.

    Examples:
        >>> relative_source_path("com.x.Y")
        'com/x/Y.scala'
    """
    return qualified_name.replace(".", "/") + SOURCE_EXTENSION


def resolve_source_path(folder: Path, qualified_name: str) -> Path:
    """Resolve ``{folder}/{a}/{b}/{C}.scala`` for ``a.b.C``.

    Raises:
        ValueError: If the name holds a path separator or the resulting path
            escapes *folder*.
    """
    # A back-quoted name or a trailing comment can carry a separator.
    if any(sep in qualified_name for sep in _PATH_SEPARATORS):
        msg = f"Type name contains a path separator: {qualified_name!r}"
        raise ValueError(msg)

    result = folder / relative_source_path(qualified_name)

    # Guard against path traversal via crafted segments
    if not result.resolve().is_relative_to(folder.resolve()):
        msg = f"Path escapes source folder: {result}"
        raise ValueError(msg)

    return result


def source_file_exists(folder: Path, qualified_name: str) -> bool:
    """Whether a file already occupies the path for *qualified_name*."""
    return (folder / relative_source_path(qualified_name)).exists()


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def write_source_file(path: Path, content: str) -> None:
    """Write a new source file, creating parent directories.

    Raises:
        FileExistsError: If *path* already exists. Existing files are never
            overwritten.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("x", encoding="utf-8") as fh:
        fh.write(content)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def find_package_dirs(root: Path) -> list[tuple[str, ...]]:
    """Return every directory below *root* as a tuple of path segments.

    Skips hidden tool directories such as ``.git/``.
    """
    if not root.is_dir():
        return []

    results: list[tuple[str, ...]] = []
    for path in root.rglob("*"):
        if not path.is_dir():
            continue
        parts = path.relative_to(root).parts
        if any(part.startswith(_HIDDEN_PREFIX) for part in parts):
            continue
        results.append(parts)

    return sorted(results)


def find_source_files(root: Path) -> list[Path]:
    """Discover all ``.scala`` files below *root*."""
    if not root.is_dir():
        return []
    return sorted(
        path
        for path in root.rglob(f"*{SOURCE_EXTENSION}")
        if path.is_file() and not any(
            part.startswith(_HIDDEN_PREFIX) for part in path.relative_to(root).parts
        )
    )
