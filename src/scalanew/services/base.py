"""BaseService — foundation for scalanew services.

Every service receives a :class:`Workspace` at construction time. The
workspace provides the settings, the symbol index, templates, and plugins
for one project.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scalanew.infrastructure.workspace import Workspace


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class FileCreatorService(BaseService):
            def validate_name(self, name: str) -> ServiceResult:
                lookup = self._workspace.symbol_lookup
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace
