"""Background symbol index answering "is this type already defined?".

The index is a long-lived worker backed by a ThreadPoolExecutor. Queries
return a :class:`~concurrent.futures.Future` so callers decide how long they
are willing to wait. Answers come from, in order:

1. plugins implementing ``scalanew_type_exists``,
2. compiled classes in the configured class directories,
3. entries of the jar files on the classpath,
4. top-level ``class``/``trait``/``object`` declarations in Scala sources.

Jar entries and source declarations are scanned once, on first use, on the
worker thread.
"""

from __future__ import annotations

import logging
import re
import threading
import zipfile
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TYPE_CHECKING

from scalanew.infrastructure.filesystem import find_source_files

if TYPE_CHECKING:
    from pathlib import Path

    from scalanew.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

SymbolLookup = Callable[[str], Future[bool]]

_PACKAGE_RE = re.compile(r"^\s*package\s+([\w.]+)\s*;?\s*$", re.MULTILINE)
_TOP_LEVEL_TYPE_RE = re.compile(
    r"^(?:(?:abstract|final|sealed|implicit|case|private|protected)\s+)*"
    r"(?:class|trait|object)\s+([\w$]+)",
    re.MULTILINE,
)


def scan_source_types(source: str) -> set[str]:
    """Return the fully-qualified names of top-level types declared in *source*.

    Chained package clauses are joined. Only unindented declarations count.

    Examples:
        >>> sorted(scan_source_types("package a\\npackage b\\n\\nclass C\\nobject D"))
        ['a.b.C', 'a.b.D']
    """
    package = ".".join(_PACKAGE_RE.findall(source))
    prefix = f"{package}." if package else ""
    return {f"{prefix}{name}" for name in _TOP_LEVEL_TYPE_RE.findall(source)}


class SymbolIndex:
    """Symbol-existence service over class directories, jars, and sources.

    Parameters:
        source_roots: Directories holding Scala sources.
        class_dirs: Compiler output directories.
        classpath: Jar files.
        plugin_manager: Optional plugins consulted before the local index.
        index_sources: Whether to scan sources for declarations.
        sync: Answer on the calling thread (useful for testing).
        max_workers: ThreadPoolExecutor worker count.
    """

    def __init__(
        self,
        *,
        source_roots: Sequence[Path] = (),
        class_dirs: Sequence[Path] = (),
        classpath: Sequence[Path] = (),
        plugin_manager: PluginManager | None = None,
        index_sources: bool = True,
        sync: bool = False,
        max_workers: int = 1,
    ) -> None:
        self._source_roots = list(source_roots)
        self._class_dirs = list(class_dirs)
        self._classpath = list(classpath)
        self._pm = plugin_manager
        self._index_sources = index_sources
        self._executor: ThreadPoolExecutor | None = (
            None
            if sync
            else ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="scalanew-symbols")
        )
        self._lock = threading.Lock()
        self._jar_entries: set[str] | None = None
        self._source_types: set[str] | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def exists(self, qualified_name: str) -> Future[bool]:
        """Submit a lookup for *qualified_name*; the future resolves to a bool."""
        if self._executor is None:
            future: Future[bool] = Future()
            try:
                future.set_result(self._lookup(qualified_name))
            except Exception as exc:
                future.set_exception(exc)
            return future
        return self._executor.submit(self._lookup, qualified_name)

    def shutdown(self) -> None:
        """Stop the worker; queued lookups are cancelled."""
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> SymbolIndex:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _lookup(self, qualified_name: str) -> bool:
        if self._pm is not None:
            answer = self._pm.type_exists(qualified_name)
            if answer is not None:
                logger.debug("Plugin answered %s for %s", answer, qualified_name)
                return bool(answer)

        class_file = qualified_name.replace(".", "/") + ".class"
        if any((d / class_file).is_file() for d in self._class_dirs):
            return True
        if class_file in self._load_jar_entries():
            return True
        return self._index_sources and qualified_name in self._load_source_types()

    def _load_jar_entries(self) -> set[str]:
        with self._lock:
            if self._jar_entries is None:
                entries: set[str] = set()
                for jar in self._classpath:
                    try:
                        with zipfile.ZipFile(jar) as zf:
                            entries.update(n for n in zf.namelist() if n.endswith(".class"))
                    except (OSError, zipfile.BadZipFile):
                        logger.warning("Skipping unreadable classpath entry %s", jar)
                self._jar_entries = entries
                logger.debug("Indexed %d classes from %d jars", len(entries), len(self._classpath))
            return self._jar_entries

    def _load_source_types(self) -> set[str]:
        with self._lock:
            if self._source_types is None:
                types: set[str] = set()
                for root in self._source_roots:
                    for path in find_source_files(root):
                        try:
                            types |= scan_source_types(path.read_text(encoding="utf-8"))
                        except (OSError, UnicodeDecodeError):
                            logger.warning("Skipping unreadable source %s", path)
                self._source_types = types
                logger.debug("Indexed %d source types", len(types))
            return self._source_types
