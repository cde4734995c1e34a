"""Shared Jinja2 template loading with per-project override support."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

TEMPLATE_SUFFIX = ".scala.j2"


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    User overrides are loaded from ``.scalanew/templates/`` inside the project.
    Both a namespaced directory (for example ``.scalanew/templates/scala/``)
    and the shared root are supported.
    """

    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / ".scalanew" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("scalanew", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)


def template_kinds(env: Environment) -> list[str]:
    """Return the template kinds (file names without suffix) *env* can render."""
    return sorted(
        name.removesuffix(TEMPLATE_SUFFIX)
        for name in env.list_templates()
        if name.endswith(TEMPLATE_SUFFIX) and "/" not in name
    )


def render_source(env: Environment, kind: str, variables: dict[str, str]) -> str:
    """Render the *kind* template with the given template variables.

    Raises:
        jinja2.TemplateNotFound: If no template exists for *kind*.
    """
    template = env.get_template(f"{kind}{TEMPLATE_SUFFIX}")
    return template.render(**variables)
