"""Tests for FileCreatorService — validate, create, and path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from scalanew.config.settings import ScalanewSettings
from scalanew.infrastructure.workspace import Workspace
from scalanew.plugins.hookspecs import hookimpl
from scalanew.services.creator import FileCreatorService
from tests.conftest import write_source


class _Recorder:
    def __init__(self) -> None:
        self.created: list[tuple[str, str, str]] = []

    @hookimpl
    def scalanew_post_create(self, path: str, qualified_name: str, kind: str) -> None:
        self.created.append((path, qualified_name, kind))


class _Failing:
    @hookimpl
    def scalanew_post_create(self, path: str, qualified_name: str, kind: str) -> None:
        raise RuntimeError("hook failed")


class TestValidateName:
    def test_valid_name(self, workspace: Workspace) -> None:
        result = FileCreatorService(workspace).validate_name("com.example.Foo")
        assert result.ok
        assert result.op == "validate_name"
        assert result.data["folder"] == str(Path("src/main/scala"))
        assert result.data["variables"] == {"package_name": "com.example", "type_name": "Foo"}

    def test_empty_name(self, workspace: Workspace) -> None:
        result = FileCreatorService(workspace).validate_name("")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_NAME"
        assert result.error.message == "No file path specified"

    def test_invalid_package(self, workspace: Workspace) -> None:
        result = FileCreatorService(workspace).validate_name("com.type.Foo")
        assert result.error is not None
        assert result.error.message == "'type' is not a valid package name"

    def test_existing_file(self, workspace: Workspace, main_root: Path) -> None:
        write_source(main_root, "com/example/Foo.scala")
        result = FileCreatorService(workspace).validate_name("com.example.Foo")
        assert result.error is not None
        assert result.error.code == "NAME_COLLISION"
        assert result.error.message == "File already exists"

    def test_existing_type_in_other_file(self, workspace: Workspace, main_root: Path) -> None:
        write_source(main_root, "com/example/Shapes.scala", "package com.example\n\nclass Circle\n")
        result = FileCreatorService(workspace).validate_name("com.example.Circle")
        assert result.error is not None
        assert result.error.code == "NAME_COLLISION"
        assert result.error.message == "Type already exists"

    def test_compiled_type(self, workspace: Workspace, project_root: Path) -> None:
        write_source(project_root / "target" / "classes", "com/example/Gen.class")
        result = FileCreatorService(workspace).validate_name("com.example.Gen")
        assert result.error is not None
        assert result.error.message == "Type already exists"

    def test_explicit_folder(self, workspace: Workspace, project_root: Path) -> None:
        test_root = project_root / "src" / "test" / "scala"
        write_source(test_root, "FooSpec.scala")
        result = FileCreatorService(workspace).validate_name("FooSpec", folder=test_root)
        assert result.error is not None
        assert result.error.message == "File already exists"

    def test_idempotent(self, workspace: Workspace) -> None:
        svc = FileCreatorService(workspace)
        first = svc.validate_name("a.b.")
        second = svc.validate_name("a.b.")
        assert first == second

    def test_not_a_scala_project(self, project_root: Path) -> None:
        (project_root / "scalanew.toml").write_text('[project]\nnatures = ["java"]\n')
        settings = ScalanewSettings.from_cli(project_root=project_root)
        result = FileCreatorService(Workspace(settings)).validate_name("Foo")
        assert result.error is not None
        assert result.error.code == "NOT_A_SCALA_PROJECT"
        assert result.error.message == "Not a Scala project"

    def test_no_source_roots(self, project_root: Path) -> None:
        (project_root / "scalanew.toml").write_text("[project]\nsource_dirs = []\n")
        settings = ScalanewSettings.from_cli(project_root=project_root)
        result = FileCreatorService(Workspace(settings)).validate_name("Foo")
        assert result.error is not None
        assert result.error.code == "NO_SOURCE_ROOT"

    @pytest.mark.parametrize("op", ["validate_name", "create_file"])
    def test_nature_checked_before_source_roots(self, project_root: Path, op: str) -> None:
        (project_root / "scalanew.toml").write_text(
            '[project]\nnatures = ["java"]\nsource_dirs = []\n'
        )
        settings = ScalanewSettings.from_cli(project_root=project_root)
        result = getattr(FileCreatorService(Workspace(settings)), op)("Foo")
        assert result.error is not None
        assert result.error.code == "NOT_A_SCALA_PROJECT"

    @pytest.mark.parametrize("name", ["Foo //x", "`a/b`"])
    def test_path_separator_in_type_name(self, workspace: Workspace, name: str) -> None:
        result = FileCreatorService(workspace).validate_name(name)
        assert result.error is not None
        assert result.error.code == "INVALID_NAME"


class TestCreateFile:
    def test_creates_class(self, workspace: Workspace, main_root: Path) -> None:
        result = FileCreatorService(workspace).create_file("com.example.Foo")
        assert result.ok
        assert result.data["kind"] == "class"
        path = main_root / "com" / "example" / "Foo.scala"
        assert result.data["path"] == str(path.relative_to(workspace.root))
        content = path.read_text(encoding="utf-8")
        assert content.startswith("package com.example\n")
        assert "class Foo" in content

    def test_kind(self, workspace: Workspace, main_root: Path) -> None:
        FileCreatorService(workspace).create_file("Shape", kind="trait")
        assert "trait Shape" in (main_root / "Shape.scala").read_text()

    def test_default_kind_from_config(self, project_root: Path, main_root: Path) -> None:
        (project_root / "scalanew.toml").write_text('[templates]\ndefault = "object"\n')
        settings = ScalanewSettings.from_cli(project_root=project_root, no_lookup=True)
        result = FileCreatorService(Workspace(settings)).create_file("Util")
        assert result.data["kind"] == "object"
        assert "object Util" in (main_root / "Util.scala").read_text()

    def test_unknown_kind(self, workspace: Workspace, main_root: Path) -> None:
        result = FileCreatorService(workspace).create_file("Foo", kind="enum")
        assert result.error is not None
        assert result.error.code == "UNKNOWN_TEMPLATE"
        assert "class" in result.error.detail["available"]
        assert not (main_root / "Foo.scala").exists()

    def test_invalid_name_writes_nothing(self, workspace: Workspace, main_root: Path) -> None:
        result = FileCreatorService(workspace).create_file("a.b.")
        assert result.error is not None
        assert result.error.message == "No type name specified"
        assert list(main_root.iterdir()) == []

    def test_path_separator_writes_nothing(self, workspace: Workspace, main_root: Path) -> None:
        result = FileCreatorService(workspace).create_file("Foo //x")
        assert result.error is not None
        assert result.error.code == "INVALID_NAME"
        assert list(main_root.iterdir()) == []

    def test_second_create_collides(self, workspace: Workspace) -> None:
        svc = FileCreatorService(workspace)
        assert svc.create_file("Foo").ok
        result = svc.create_file("Foo")
        assert result.error is not None
        assert result.error.message == "File already exists"

    def test_post_create_hook(self, workspace: Workspace) -> None:
        recorder = _Recorder()
        workspace.plugin_manager.register_plugin(recorder)
        FileCreatorService(workspace).create_file("a.Foo", kind="object")
        assert len(recorder.created) == 1
        path, name, kind = recorder.created[0]
        assert path.endswith("Foo.scala")
        assert (name, kind) == ("a.Foo", "object")

    def test_failing_hook_is_a_warning(self, workspace: Workspace) -> None:
        workspace.plugin_manager.register_plugin(_Failing())
        result = FileCreatorService(workspace).create_file("Foo")
        assert result.ok
        assert result.warnings == ["Plugin post-create hook failed for Foo"]


class TestInitialPath:
    def test_directory(self, workspace: Workspace, main_root: Path) -> None:
        pkg = main_root / "com" / "example"
        pkg.mkdir(parents=True)
        result = FileCreatorService(workspace).initial_path(pkg)
        assert result.data["initial_path"] == "com.example."

    def test_file(self, workspace: Workspace, main_root: Path) -> None:
        path = write_source(main_root, "com/example/Foo.scala")
        result = FileCreatorService(workspace).initial_path(path)
        assert result.data["initial_path"] == "com.example."

    def test_test_root(self, workspace: Workspace, project_root: Path) -> None:
        pkg = project_root / "src" / "test" / "scala" / "a"
        pkg.mkdir()
        assert FileCreatorService(workspace).initial_path(pkg).data["initial_path"] == "a."

    def test_outside_source_roots(self, workspace: Workspace, project_root: Path) -> None:
        result = FileCreatorService(workspace).initial_path(project_root / "docs")
        assert result.ok
        assert result.data["initial_path"] == ""


class TestTemplateVariables:
    def test_variables(self, workspace: Workspace) -> None:
        result = FileCreatorService(workspace).template_variables("com.x.Y")
        assert result.data["variables"] == {"package_name": "com.x", "type_name": "Y"}

    def test_unqualified(self, workspace: Workspace) -> None:
        result = FileCreatorService(workspace).template_variables("Y")
        assert result.data["variables"] == {"type_name": "Y"}


class TestCompletionEntries:
    @pytest.fixture
    def packages(self, main_root: Path) -> None:
        for rel in ("com/example/util", "com/Exotic", "org/demo", "my-scripts", ".hidden/x"):
            (main_root / rel).mkdir(parents=True)

    @pytest.mark.usefixtures("packages")
    def test_all(self, workspace: Workspace) -> None:
        result = FileCreatorService(workspace).completion_entries()
        assert result.data["items"] == [
            "com",
            "com.Exotic",
            "com.example",
            "com.example.util",
            "org",
            "org.demo",
        ]
        assert result.data["count"] == 6

    @pytest.mark.usefixtures("packages")
    def test_prefix_is_case_insensitive(self, workspace: Workspace) -> None:
        result = FileCreatorService(workspace).completion_entries("COM.EX")
        assert result.data["items"] == ["com.Exotic", "com.example", "com.example.util"]

    @pytest.mark.usefixtures("packages")
    def test_prefix_is_literal(self, workspace: Workspace) -> None:
        assert FileCreatorService(workspace).completion_entries("c.m").data["items"] == []

    def test_empty_root(self, workspace: Workspace) -> None:
        result = FileCreatorService(workspace).completion_entries("x")
        assert result.data == {"prefix": "x", "items": [], "count": 0}
