"""
Tests for the resolve use case — standalone and workspace resolution.
"""

from pathlib import Path

import pytest

from localproject.core.errors import (
    DescriptorNotFoundError,
    DescriptorReadError,
    DuplicateCoordinateError,
    MissingCoordinateError,
    ProjectNotFoundInWorkspaceError,
)
from localproject.core.use_cases.resolve import (
    resolve,
    resolve_project,
    resolve_project_with_workspace,
)


class TestResolveProject:
    def test_standalone(self, multi_module: Path):
        project = resolve_project(multi_module / "b")
        assert project.artifact_id == "b"
        assert project.group_id == "org.acme"
        assert project.workspace is None

    def test_idempotent(self, multi_module: Path):
        first = resolve_project(multi_module / "a" / "a1")
        second = resolve_project(multi_module / "a" / "a1")
        assert first is not second
        assert first.key == second.key
        assert first.version == second.version
        assert first.dir == second.dir
        assert first.to_dict() == second.to_dict()

    def test_missing_descriptor(self, tmp_path: Path):
        with pytest.raises(DescriptorReadError):
            resolve_project(tmp_path)

    def test_missing_coordinate(self, tmp_path: Path, write_pom):
        write_pom(tmp_path, "orphan", group_id=None)
        with pytest.raises(MissingCoordinateError):
            resolve_project(tmp_path)


class TestResolveProjectWithWorkspace:
    def test_nested_module(self, multi_module: Path):
        project = resolve_project_with_workspace(multi_module / "a" / "a1")
        assert project.dir == (multi_module / "a" / "a1").resolve()
        ws = project.workspace
        assert ws is not None
        assert len(ws) == 4
        assert {str(k) for k in ws.projects} == {
            "org.acme:root", "org.acme:a", "org.acme:b", "org.acme:a1",
        }
        assert ws.get_project("org.acme", "root").dir == multi_module.resolve()

    def test_root_itself(self, multi_module: Path):
        project = resolve_project_with_workspace(multi_module)
        assert project.artifact_id == "root"
        assert len(project.workspace) == 4

    def test_unrelated_enclosing_project_is_skipped(self, tmp_path: Path, write_pom):
        # outer-of-outer has a descriptor but does not declare "outer"
        write_pom(tmp_path, "unrelated", packaging="pom", modules=["lib"])
        write_pom(tmp_path / "lib", "lib")
        outer = write_pom(tmp_path / "outer", "outer", packaging="pom", modules=["inner"])
        inner = write_pom(outer / "inner", "inner")

        project = resolve_project_with_workspace(inner)
        assert project.artifact_id == "inner"
        ws = project.workspace
        assert ws is not None
        assert ws.get_project("org.acme", "outer") is not None
        assert ws.get_project("org.acme", "unrelated") is None
        assert len(ws) == 2

    def test_outermost_valid_root_wins(self, tmp_path: Path, write_pom):
        write_pom(tmp_path, "top", packaging="pom", modules=["mid"])
        mid = write_pom(tmp_path / "mid", "mid", packaging="pom", modules=["leaf"])
        leaf = write_pom(mid / "leaf", "leaf")
        project = resolve_project_with_workspace(leaf)
        assert project.workspace.get_project("org.acme", "top") is not None
        assert len(project.workspace) == 3

    def test_start_below_project_dir_not_found(self, multi_module: Path):
        start = multi_module / "b" / "src" / "main"
        start.mkdir(parents=True)
        with pytest.raises(ProjectNotFoundInWorkspaceError) as exc:
            resolve_project_with_workspace(start)
        assert exc.value.path == start

    def test_undeclared_module_is_its_own_root(self, multi_module: Path, write_pom):
        stray = write_pom(multi_module / "stray", "stray")
        # "stray" has its own descriptor, so it is its own last candidate root
        project = resolve_project_with_workspace(stray)
        assert project.artifact_id == "stray"
        assert len(project.workspace) == 1

    def test_no_descriptor_anywhere(self, tmp_path: Path):
        start = tmp_path / "empty"
        start.mkdir()
        with pytest.raises(DescriptorNotFoundError):
            resolve_project_with_workspace(start)

    def test_broken_module_fails_whole_call(self, multi_module: Path):
        pom = multi_module / "pom.xml"
        pom.write_text(pom.read_text().replace("<module>b</module>",
                                               "<module>b</module><module>ghost</module>"))
        (multi_module / "ghost").mkdir()
        with pytest.raises(DescriptorReadError):
            resolve_project_with_workspace(multi_module / "a" / "a1")

    def test_duplicate_coordinates_fail(self, tmp_path: Path, write_pom):
        write_pom(tmp_path, "root", packaging="pom", modules=["one", "two"])
        write_pom(tmp_path / "one", "same")
        write_pom(tmp_path / "two", "same")
        with pytest.raises(DuplicateCoordinateError):
            resolve_project_with_workspace(tmp_path / "one")


class TestResolveUseCase:
    def test_success(self, multi_module: Path):
        result = resolve(multi_module / "b")
        assert result.error is None
        assert result.project is not None
        assert result.workspace is result.project.workspace
        d = result.to_dict()
        assert d["project"]["artifact_id"] == "b"
        assert d["workspace"]["total"] == 4

    def test_standalone(self, multi_module: Path):
        result = resolve(multi_module / "b", workspace=False)
        assert result.workspace is None
        assert "workspace" not in result.to_dict()

    def test_error_captured(self, tmp_path: Path):
        result = resolve(tmp_path)
        assert result.project is None
        assert result.error_type == "DescriptorNotFoundError"
        assert result.to_dict() == {
            "error": result.error,
            "error_type": "DescriptorNotFoundError",
        }

    def test_defaults_to_cwd(self, multi_module: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(multi_module / "a")
        result = resolve()
        assert result.project is not None
        assert result.project.artifact_id == "a"
