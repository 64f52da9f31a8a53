"""Workspace root handling and classification of locations reported by rust-analyzer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname


class WorkspaceError(Exception):
    """Base class for workspace and path resolution errors."""


class WorkspaceMissingError(WorkspaceError):
    """The requested workspace path does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"workspace path does not exist: {path}")
        self.path = path


class WorkspaceNotDirectoryError(WorkspaceError):
    """The requested workspace path is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"workspace path is not a directory: {path}")
        self.path = path


class FileMissingError(WorkspaceError):
    """The requested file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"file does not exist: {path}")
        self.path = path


class OutsideWorkspaceError(WorkspaceError):
    """The requested path lies outside the active workspace root."""

    def __init__(self) -> None:
        super().__init__("path is outside the active workspace")


class NotAFileError(WorkspaceError):
    """The requested path exists but is not a regular file."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"path is not a file: {path}")
        self.path = path


class InvalidFileUriError(WorkspaceError):
    """A URI could not be parsed or converted into a file path."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"invalid file URI: {uri}")
        self.uri = uri


@dataclass(frozen=True)
class WorkspaceWarnings:
    """Non-fatal observations about a workspace root."""

    missing_cargo_toml: bool = False

    def to_dict(self) -> dict:
        return {"missing_cargo_toml": self.missing_cargo_toml}


class LocationKind(enum.Enum):
    """Where a reported location lives relative to the workspace."""

    WORKSPACE = "workspace"
    EXTERNAL_DEPENDENCY_SOURCE = "external_dependency_source"
    NON_FILE_URI = "non_file_uri"


@dataclass(frozen=True)
class ClassifiedLocation:
    """A URI together with its classification and, when on disk, its canonical path."""

    uri: str
    kind: LocationKind
    path: Path | None = field(default=None)

    def to_dict(self) -> dict:
        return {
            "uri": self.uri,
            "kind": self.kind.value,
            "path": None if self.path is None else str(self.path),
        }


def _is_within(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def _file_uri_to_path(uri: str) -> Path:
    parts = urlsplit(uri)
    if parts.netloc not in ("", "localhost"):
        raise InvalidFileUriError(uri)
    path = Path(url2pathname(parts.path))
    if not path.is_absolute():
        raise InvalidFileUriError(uri)
    return path


class Workspace:
    """A canonicalised workspace root directory."""

    def __init__(self, root: str | Path) -> None:
        given = Path(root)
        if not given.exists():
            raise WorkspaceMissingError(given)
        if not given.is_dir():
            raise WorkspaceNotDirectoryError(given)
        self._root = given.resolve(strict=True)
        self._warnings = WorkspaceWarnings(
            missing_cargo_toml=not (self._root / "Cargo.toml").is_file()
        )

    def __repr__(self) -> str:
        return f"Workspace({str(self._root)!r})"

    @property
    def root(self) -> Path:
        return self._root

    @property
    def warnings(self) -> WorkspaceWarnings:
        return self._warnings

    def resolve_existing_file(self, file_path: str | Path) -> Path:
        """Resolve a path (relative to the root or absolute) to an existing file inside the workspace."""
        file_path = Path(file_path)
        candidate = file_path if file_path.is_absolute() else self._root / file_path
        if not candidate.exists():
            raise FileMissingError(candidate)
        canonical = candidate.resolve(strict=True)
        if not _is_within(canonical, self._root):
            raise OutsideWorkspaceError()
        if not canonical.is_file():
            raise NotAFileError(canonical)
        return canonical

    def uri_for_file(self, file: str | Path) -> str:
        """Return the file URI of a file that lies inside the workspace."""
        file = Path(file)
        if file.is_absolute():
            canonical = file.resolve(strict=True)
        else:
            canonical = self.resolve_existing_file(file)
        if not _is_within(canonical, self._root):
            raise OutsideWorkspaceError()
        return canonical.as_uri()

    def classify_url(self, uri: str) -> ClassifiedLocation:
        """Classify an already parsed absolute URI."""
        scheme = urlsplit(uri).scheme
        if scheme != "file":
            return ClassifiedLocation(uri=uri, kind=LocationKind.NON_FILE_URI, path=None)

        path = _file_uri_to_path(uri)
        canonical = path.resolve(strict=True) if path.exists() else None
        if canonical is not None and _is_within(canonical, self._root):
            kind = LocationKind.WORKSPACE
        else:
            kind = LocationKind.EXTERNAL_DEPENDENCY_SOURCE
        return ClassifiedLocation(uri=uri, kind=kind, path=canonical)

    def classify_lsp_uri(self, uri: str) -> ClassifiedLocation:
        """Parse a URI string as reported over LSP and classify it."""
        try:
            parts = urlsplit(uri)
        except ValueError as error:
            raise InvalidFileUriError(uri) from error
        if not parts.scheme or any(ch.isspace() for ch in uri):
            raise InvalidFileUriError(uri)
        return self.classify_url(uri)


def is_rust_file(path: str | Path) -> bool:
    """Whether the path has an ``.rs`` extension."""
    return Path(path).suffix == ".rs"