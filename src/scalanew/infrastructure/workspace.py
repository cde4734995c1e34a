"""Workspace — the single dependency injected into every service.

Owns the per-project collaborators: resolved source roots, the background
symbol index, the template environment, and the plugin manager. Expensive
members are created lazily so commands that never look up a symbol never
start a worker thread.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from scalanew.infrastructure.symbols import SymbolIndex
from scalanew.infrastructure.templates import build_template_environment
from scalanew.plugins.manager import PluginManager

if TYPE_CHECKING:
    from pathlib import Path

    from jinja2 import Environment

    from scalanew.config.settings import ScalanewSettings
    from scalanew.infrastructure.symbols import SymbolLookup

logger = logging.getLogger(__name__)


class Workspace:
    """Project-scoped access to settings, symbols, templates, and plugins.

    Parameters:
        settings: Resolved settings for the project.
        sync_lookup: Answer symbol lookups on the calling thread.
    """

    def __init__(self, settings: ScalanewSettings, *, sync_lookup: bool = False) -> None:
        self._settings = settings
        self._sync_lookup = sync_lookup
        self._symbol_index: SymbolIndex | None = None
        self._templates: Environment | None = None
        self._plugin_manager: PluginManager | None = None

    @property
    def settings(self) -> ScalanewSettings:
        return self._settings

    @property
    def root(self) -> Path:
        return self._settings.project_root

    @property
    def source_roots(self) -> list[Path]:
        return self._settings.source_roots

    @property
    def plugin_manager(self) -> PluginManager:
        """Plugins from entry points and ``.scalanew/plugins/`` (loaded lazily)."""
        if self._plugin_manager is None:
            pm = PluginManager()
            names = pm.discover_and_load(local_dir=self.root / ".scalanew" / "plugins")
            if names:
                logger.debug("Loaded plugins: %s", ", ".join(names))
            self._plugin_manager = pm
        return self._plugin_manager

    @property
    def templates(self) -> Environment:
        if self._templates is None:
            self._templates = build_template_environment("scala", project_root=self.root)
        return self._templates

    @property
    def symbol_lookup(self) -> SymbolLookup | None:
        """The symbol-existence capability, or None when lookups are disabled."""
        if self._settings.no_lookup or not self._settings.lookup.enabled:
            return None
        if self._symbol_index is None:
            project = self._settings.project
            self._symbol_index = SymbolIndex(
                source_roots=self.source_roots,
                class_dirs=[self.root / d for d in project.class_dirs],
                classpath=[self.root / jar for jar in project.classpath],
                plugin_manager=self.plugin_manager,
                index_sources=self._settings.lookup.index_sources,
                sync=self._sync_lookup,
                max_workers=self._settings.lookup.workers,
            )
        return self._symbol_index.exists

    def close(self) -> None:
        """Stop the symbol index worker, if one was started."""
        if self._symbol_index is not None:
            self._symbol_index.shutdown()
            self._symbol_index = None
