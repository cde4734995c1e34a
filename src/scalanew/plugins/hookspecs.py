"""Pluggy hook specifications for scalanew.

Plugins bridge the symbol index to external analysis services (a build
server, a language server, a compiler daemon) that know about types the
local class directories and sources do not.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("scalanew")
hookimpl = pluggy.HookimplMarker("scalanew")


class ScalanewHookSpec:
    """Hook specifications for the scalanew plugin system."""

    @hookspec(firstresult=True)
    def scalanew_type_exists(self, qualified_name: str) -> bool | None:
        """Return True/False if the plugin knows whether *qualified_name* is
        a defined type, or None to defer to the next plugin."""

    @hookspec
    def scalanew_post_create(self, path: str, qualified_name: str, kind: str) -> None:
        """Called after a new source file was written."""
