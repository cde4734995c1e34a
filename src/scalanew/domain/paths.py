"""Initial package path derivation from a selected resource."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PurePath, PurePosixPath


def _segments(path: str | PurePath) -> tuple[str, ...]:
    """Return the path segments, ignoring the root and empty components."""
    pure = path if isinstance(path, PurePath) else PurePosixPath(path)
    return tuple(part for part in pure.parts if part not in ("", pure.anchor))


def _is_prefix_of(prefix: str | PurePath, path: str | PurePath) -> bool:
    prefix_parts = _segments(prefix)
    path_parts = _segments(path)
    return path_parts[: len(prefix_parts)] == prefix_parts


def generate_initial_path(
    path: str | PurePath,
    src_dirs: Sequence[str | PurePath],
    *,
    is_directory: bool,
) -> str:
    """Derive the dotted package prefix to pre-fill for a selected resource.

    *path* is the selected resource. *src_dirs* are the source roots of its
    project; the first one that is a segment-wise prefix of *path* wins.
    When *is_directory* is False the last segment (the file name) is dropped.
    A non-empty result ends with ``.`` so a type name can be typed directly.

    Examples:
        >>> generate_initial_path("/proj/src/com/x/Y.scala", ["/proj/src"], is_directory=False)
        'com.x.'
        >>> generate_initial_path("/proj/src/com/x", ["/proj/src"], is_directory=True)
        'com.x.'
        >>> generate_initial_path("/other/com", ["/proj/src"], is_directory=True)
        ''
    """
    src_dir = next((d for d in src_dirs if _is_prefix_of(d, path)), None)
    if src_dir is None:
        return ""

    remaining = _segments(path)[len(_segments(src_dir)) :]
    if not is_directory:
        remaining = remaining[:-1]

    pkg = ".".join(remaining)
    return f"{pkg}." if pkg else ""
