"""FileCreatorService — the "new Scala file" use cases.

Create pipeline: PROJECT CHECK → VALIDATE → COLLISION CHECK → RENDER → WRITE → EVENT → RESPOND
"""

from __future__ import annotations

import re
from pathlib import Path

from jinja2 import TemplateNotFound

from scalanew.domain.identifiers import is_valid_package_ident
from scalanew.domain.names import generate_template_variables
from scalanew.domain.paths import generate_initial_path
from scalanew.domain.validation import ErrorKind, Invalid, Validation, do_validation
from scalanew.infrastructure.filesystem import (
    find_package_dirs,
    resolve_source_path,
    write_source_file,
)
from scalanew.infrastructure.templates import render_source, template_kinds
from scalanew.services.base import BaseService
from scalanew.services.existence import ExistenceChecker
from scalanew.services.result import ServiceResult
from scalanew.services.telemetry import trace_span, traced

ERROR_CODES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_INPUT: "INVALID_NAME",
    ErrorKind.COLLISION: "NAME_COLLISION",
    ErrorKind.NOT_A_SCALA_PROJECT: "NOT_A_SCALA_PROJECT",
}


class FileCreatorService(BaseService):
    """Validates type names and creates Scala source files from templates."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check_name(self, folder: Path, name: str) -> Validation:
        """Return the raw verdict for *name* in *folder*.

        Lexical validation runs first; the collision check (file on disk,
        then symbol lookup) only runs for lexically valid names.
        """
        if not self._workspace.settings.is_scala_project:
            return Invalid("Not a Scala project", kind=ErrorKind.NOT_A_SCALA_PROJECT)

        with trace_span("validate"):
            outcome = do_validation(name)
        if isinstance(outcome, Invalid):
            return outcome

        checker = ExistenceChecker(
            self._workspace.symbol_lookup,
            timeout=self._workspace.settings.lookup.timeout,
        )
        with trace_span("existence_check"):
            return outcome(folder, checker)

    @traced
    def validate_name(self, name: str, *, folder: Path | None = None) -> ServiceResult:
        """Validate *name* as a new type in *folder* (default: first source root)."""
        op = "validate_name"
        if not self._workspace.settings.is_scala_project:
            return self._not_scala(op)
        target = self._resolve_folder(folder)
        if target is None:
            return self._no_source_root(op)

        verdict = self.check_name(target, name)
        if isinstance(verdict, Invalid):
            return self._rejected(op, name, verdict)
        try:
            resolve_source_path(target, name)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_NAME", str(exc), name=name)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "folder": self._display(target),
                "variables": generate_template_variables(name),
            },
        )

    @traced
    def create_file(
        self,
        name: str,
        *,
        folder: Path | None = None,
        kind: str | None = None,
    ) -> ServiceResult:
        """Validate *name*, render the *kind* template, and write the new file."""
        op = "create_file"
        kind = kind or self._workspace.settings.templates.default
        if not self._workspace.settings.is_scala_project:
            return self._not_scala(op)
        target = self._resolve_folder(folder)
        if target is None:
            return self._no_source_root(op)

        verdict = self.check_name(target, name)
        if isinstance(verdict, Invalid):
            return self._rejected(op, name, verdict)

        try:
            path = resolve_source_path(target, name)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_NAME", str(exc), name=name)

        variables = generate_template_variables(name)
        env = self._workspace.templates
        with trace_span("render"):
            try:
                content = render_source(env, kind, variables)
            except TemplateNotFound:
                return ServiceResult.failure(
                    op,
                    "UNKNOWN_TEMPLATE",
                    f"Unknown template kind: {kind!r}",
                    available=template_kinds(env),
                )

        with trace_span("write"):
            try:
                write_source_file(path, content)
            except FileExistsError:
                return ServiceResult.failure(op, "NAME_COLLISION", "File already exists", name=name)

        warnings = self._workspace.plugin_manager.notify_created(str(path), name, kind)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "kind": kind,
                "path": self._display(path),
                "variables": variables,
            },
            warnings=warnings,
        )

    @traced
    def initial_path(self, resource: Path) -> ServiceResult:
        """Derive the package prefix to pre-fill for a selected file or folder."""
        resource = resource.resolve()
        value = generate_initial_path(
            resource,
            [root.resolve() for root in self._workspace.source_roots],
            is_directory=resource.is_dir(),
        )
        return ServiceResult(
            ok=True,
            op="initial_path",
            data={"resource": self._display(resource), "initial_path": value},
        )

    @traced
    def template_variables(self, name: str) -> ServiceResult:
        """Split *name* into the ``package_name``/``type_name`` variables."""
        return ServiceResult(
            ok=True,
            op="template_variables",
            data={"name": name, "variables": generate_template_variables(name)},
        )

    @traced
    def completion_entries(self, prefix: str = "", *, folder: Path | None = None) -> ServiceResult:
        """List packages under *folder* starting with *prefix* (case-insensitive)."""
        op = "completion_entries"
        target = self._resolve_folder(folder)
        if target is None:
            return self._no_source_root(op)

        matcher = re.compile(re.escape(prefix), re.IGNORECASE)
        packages = [
            ".".join(parts)
            for parts in find_package_dirs(target)
            if all(is_valid_package_ident(part) for part in parts)
        ]
        items = [pkg for pkg in packages if matcher.match(pkg)]
        return ServiceResult(
            ok=True,
            op=op,
            data={"prefix": prefix, "items": items, "count": len(items)},
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve_folder(self, folder: Path | None) -> Path | None:
        """Explicit folder, else the first existing source root, else the first configured."""
        if folder is not None:
            return folder
        roots = self._workspace.source_roots
        existing = [root for root in roots if root.is_dir()]
        if existing:
            return existing[0]
        return roots[0] if roots else None

    def _display(self, path: Path) -> str:
        try:
            return str(path.relative_to(self._workspace.root))
        except ValueError:
            return str(path)

    @staticmethod
    def _rejected(op: str, name: str, verdict: Invalid) -> ServiceResult:
        return ServiceResult.failure(op, ERROR_CODES[verdict.kind], verdict.reason, name=name)

    @staticmethod
    def _not_scala(op: str) -> ServiceResult:
        code = ERROR_CODES[ErrorKind.NOT_A_SCALA_PROJECT]
        return ServiceResult.failure(op, code, "Not a Scala project")

    @staticmethod
    def _no_source_root(op: str) -> ServiceResult:
        return ServiceResult.failure(op, "NO_SOURCE_ROOT", "No source folder configured")
