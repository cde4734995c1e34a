"""Tests for local directory plugin discovery in PluginManager."""

from __future__ import annotations

from pathlib import Path

from scalanew.plugins.manager import PluginManager

# -- Plugin source code used in tests ------------------------------------------

_VALID_PLUGIN_SRC = """\
import pluggy

hookimpl = pluggy.HookimplMarker("scalanew")


class GeneratedTypes:
    \"\"\"Knows about types produced by a code generator.\"\"\"

    @hookimpl
    def scalanew_type_exists(self, qualified_name: str):
        return True if qualified_name.startswith("gen.") else None
"""

_SYNTAX_ERROR_SRC = """\
def broken(
    # missing closing paren and colon
"""

_NO_HOOKS_SRC = """\
class PlainClass:
    \"\"\"A class with no hookimpl-decorated methods.\"\"\"
    def hello(self) -> str:
        return "world"
"""


class TestLocalDiscovery:
    def test_loads_valid_plugin(self, tmp_path: Path) -> None:
        (tmp_path / "generated.py").write_text(_VALID_PLUGIN_SRC)
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)
        assert "scalanew_local_plugin_generated" in names
        assert pm.type_exists("gen.Model") is True
        assert pm.type_exists("app.Model") is None

    def test_missing_dir_is_ignored(self, tmp_path: Path) -> None:
        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path / "nope")
        assert pm.type_exists("gen.Model") is None

    def test_syntax_error_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text(_SYNTAX_ERROR_SRC)
        (tmp_path / "generated.py").write_text(_VALID_PLUGIN_SRC)
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)
        assert "scalanew_local_plugin_generated" in names
        assert "scalanew_local_plugin_broken" not in names

    def test_classes_without_hooks_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "plain.py").write_text(_NO_HOOKS_SRC)
        pm = PluginManager()
        assert "scalanew_local_plugin_plain" not in pm.discover_and_load(local_dir=tmp_path)

    def test_underscore_files_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "_helper.py").write_text(_VALID_PLUGIN_SRC)
        pm = PluginManager()
        assert "scalanew_local_plugin__helper" not in pm.discover_and_load(local_dir=tmp_path)
