from pathlib import Path

import pytest

from ra_mcp.workspace import (
    ClassifiedLocation,
    FileMissingError,
    InvalidFileUriError,
    LocationKind,
    NotAFileError,
    OutsideWorkspaceError,
    Workspace,
    WorkspaceMissingError,
    WorkspaceNotDirectoryError,
    is_rust_file,
)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "src").mkdir(parents=True)
    (root / "Cargo.toml").write_text("[package]\nname = \"demo\"\n")
    (root / "src" / "lib.rs").write_text("pub fn answer() -> u32 { 42 }\n")
    return root


def test_workspace_root_is_canonical_and_without_warnings(project: Path) -> None:
    workspace = Workspace(project)
    assert workspace.root == project.resolve()
    assert workspace.warnings.missing_cargo_toml is False


def test_workspace_warns_when_cargo_toml_missing(tmp_path: Path) -> None:
    workspace = Workspace(tmp_path)
    assert workspace.warnings.missing_cargo_toml is True
    assert workspace.warnings.to_dict() == {"missing_cargo_toml": True}


def test_missing_workspace_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(WorkspaceMissingError):
        Workspace(tmp_path / "nope")


def test_file_as_workspace_is_rejected(project: Path) -> None:
    with pytest.raises(WorkspaceNotDirectoryError):
        Workspace(project / "Cargo.toml")


def test_resolve_relative_and_absolute_files(project: Path) -> None:
    workspace = Workspace(project)
    relative = workspace.resolve_existing_file("src/lib.rs")
    absolute = workspace.resolve_existing_file(project / "src" / "lib.rs")
    assert relative == absolute
    assert relative == (project / "src" / "lib.rs").resolve()


def test_resolve_missing_file(project: Path) -> None:
    workspace = Workspace(project)
    with pytest.raises(FileMissingError):
        workspace.resolve_existing_file("src/missing.rs")


def test_resolve_outside_workspace(project: Path, tmp_path: Path) -> None:
    outside = tmp_path / "outside.rs"
    outside.write_text("fn main() {}\n")
    workspace = Workspace(project)
    with pytest.raises(OutsideWorkspaceError):
        workspace.resolve_existing_file(outside)
    with pytest.raises(OutsideWorkspaceError):
        workspace.resolve_existing_file("../outside.rs")


def test_resolve_directory_is_not_a_file(project: Path) -> None:
    workspace = Workspace(project)
    with pytest.raises(NotAFileError):
        workspace.resolve_existing_file("src")


def test_uri_for_file_round_trips_through_classification(project: Path) -> None:
    workspace = Workspace(project)
    uri = workspace.uri_for_file("src/lib.rs")
    assert uri.startswith("file://")
    classified = workspace.classify_url(uri)
    assert classified.kind is LocationKind.WORKSPACE
    assert classified.path == (project / "src" / "lib.rs").resolve()
    assert classified.uri == uri


def test_uri_for_file_outside_workspace(project: Path, tmp_path: Path) -> None:
    outside = tmp_path / "outside.rs"
    outside.write_text("fn main() {}\n")
    workspace = Workspace(project)
    with pytest.raises(OutsideWorkspaceError):
        workspace.uri_for_file(outside)


def test_non_file_uri_is_classified_without_path(project: Path) -> None:
    workspace = Workspace(project)
    classified = workspace.classify_url("https://example.com/docs")
    assert classified.kind is LocationKind.NON_FILE_URI
    assert classified.path is None
    assert classified.to_dict() == {
        "uri": "https://example.com/docs",
        "kind": "non_file_uri",
        "path": None,
    }


def test_external_and_missing_files_are_dependency_sources(project: Path, tmp_path: Path) -> None:
    outside = tmp_path / "dep.rs"
    outside.write_text("pub struct Dep;\n")
    workspace = Workspace(project)

    external = workspace.classify_lsp_uri(outside.resolve().as_uri())
    assert external.kind is LocationKind.EXTERNAL_DEPENDENCY_SOURCE
    assert external.path == outside.resolve()

    missing = workspace.classify_lsp_uri((tmp_path / "gone.rs").resolve().as_uri())
    assert missing.kind is LocationKind.EXTERNAL_DEPENDENCY_SOURCE
    assert missing.path is None


def test_invalid_uris_are_rejected(project: Path) -> None:
    workspace = Workspace(project)
    with pytest.raises(InvalidFileUriError):
        workspace.classify_lsp_uri("not a uri")
    with pytest.raises(InvalidFileUriError):
        workspace.classify_url("file://otherhost/tmp/lib.rs")


def test_classified_location_to_dict_reports_kind_value(project: Path) -> None:
    location = ClassifiedLocation(
        uri="file:///x.rs", kind=LocationKind.WORKSPACE, path=project / "x.rs"
    )
    data = location.to_dict()
    assert data["kind"] == LocationKind.WORKSPACE.value
    assert data["path"] == str(project / "x.rs")


@pytest.mark.parametrize(
    ("path", "expected"),
    [("src/lib.rs", True), ("Cargo.toml", False), ("src/main", False), (".rs", False)],
)
def test_is_rust_file(path: str, expected: bool) -> None:
    assert is_rust_file(path) is expected