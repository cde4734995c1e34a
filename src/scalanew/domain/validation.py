"""Name validation verdicts and the lexical validation pipeline.

A qualified name is validated left to right: emptiness, the back-quote rule,
the type segment's presence, every package segment, and finally the type
segment. The first failure wins. A name that passes all lexical checks
yields an :class:`ExistenceCheck`, which still has to be run against a
folder to produce a final verdict.

INVARIANT: Verdicts are immutable and built fresh on every call.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from scalanew.domain.identifiers import is_valid_package_ident, is_valid_type_ident
from scalanew.domain.names import has_dots_after_back_quote, split_qualified_name

if TYPE_CHECKING:
    from pathlib import Path


class ErrorKind(enum.Enum):
    """Category of a failed validation."""

    INVALID_INPUT = "invalid_input"
    COLLISION = "collision"
    NOT_A_SCALA_PROJECT = "not_a_scala_project"


@dataclass(frozen=True)
class Valid:
    """The name is acceptable."""

    ok = True


@dataclass(frozen=True)
class Invalid:
    """The name is rejected; *reason* is shown to the user verbatim."""

    reason: str
    kind: ErrorKind = field(default=ErrorKind.INVALID_INPUT, compare=False)

    ok = False


Validation = Valid | Invalid

VALID = Valid()


class FileExistenceChecker(Protocol):
    """Anything that can decide whether a name is already taken in a folder."""

    def check(self, folder: Path, qualified_name: str) -> Validation: ...


@dataclass(frozen=True)
class ExistenceCheck:
    """Deferred collision check bound to a lexically valid qualified name."""

    qualified_name: str

    def __call__(self, folder: Path, checker: FileExistenceChecker) -> Validation:
        return checker.check(folder, self.qualified_name)


def do_validation(name: str) -> Invalid | ExistenceCheck:
    """Validate *name* lexically; reject empty input up front."""
    if not name:
        return Invalid("No file path specified")
    return validate_fully_qualified_type(name)


def validate_fully_qualified_type(fully_qualified_type: str) -> Invalid | ExistenceCheck:
    """Validate every segment of a dotted name.

    Package segments are reported before the type segment.
    """
    if has_dots_after_back_quote(fully_qualified_type):
        return Invalid("Dots after a back-quote is not supported for Scala types in the file wizard")

    parts = split_qualified_name(fully_qualified_type)
    type_name = parts[-1]
    if not type_name:
        return Invalid("No type name specified")

    for segment in parts[:-1]:
        if not is_valid_package_ident(segment):
            return Invalid(f"'{segment}' is not a valid package name")

    if not is_valid_type_ident(type_name):
        return Invalid(f"'{type_name}' is not a valid type name")

    return ExistenceCheck(fully_qualified_type)
