"""ExistenceChecker — collision check for a lexically valid name.

A name collides when a file already sits at its source path or when the
symbol lookup reports a type with the same fully-qualified name.

INVARIANT: Lookup failures are never errors. An unavailable lookup, a
timeout, or a failed query all count as "type not found" (fail open).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from scalanew.domain.validation import VALID, ErrorKind, Invalid, Validation
from scalanew.infrastructure.filesystem import source_file_exists
from scalanew.services.telemetry import trace_span

if TYPE_CHECKING:
    from pathlib import Path

    from scalanew.infrastructure.symbols import SymbolLookup

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0


class ExistenceChecker:
    """Check a folder and a symbol lookup for an existing file or type.

    Parameters:
        lookup: Symbol-existence capability, or None if unavailable.
        timeout: Seconds to wait for the lookup before giving up.
    """

    def __init__(self, lookup: SymbolLookup | None = None, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._lookup = lookup
        self._timeout = timeout

    def check(self, folder: Path, qualified_name: str) -> Validation:
        if source_file_exists(folder, qualified_name):
            return Invalid("File already exists", kind=ErrorKind.COLLISION)
        if self.type_exists(qualified_name):
            return Invalid("Type already exists", kind=ErrorKind.COLLISION)
        return VALID

    def type_exists(self, qualified_name: str) -> bool:
        if self._lookup is None:
            return False
        with trace_span("symbol_lookup") as span:
            try:
                found = bool(self._lookup(qualified_name).result(timeout=self._timeout))
            except TimeoutError:
                logger.debug("Symbol lookup timed out for %s", qualified_name)
                found = False
            except Exception:
                logger.debug("Symbol lookup failed for %s", qualified_name, exc_info=True)
                found = False
            if span:
                span.annotate("found", found)
        return found
