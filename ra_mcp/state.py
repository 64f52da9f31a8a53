"""Server configuration and the mutable active-workspace state."""

from __future__ import annotations

from dataclasses import dataclass, field

from ra_mcp.workspace import Workspace


@dataclass(frozen=True)
class ServerConfig:
    """Server-wide switches."""

    cargo_tools_enabled: bool = True


@dataclass(frozen=True)
class WorkspaceSnapshot:
    """A consistent copy of the workspace state taken for one tool call."""

    workspace: Workspace
    root: str
    notes: list[str] = field(default_factory=list)


class ServerState:
    """Holds the currently active workspace."""

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @property
    def workspace(self) -> Workspace:
        return self._workspace

    def workspace_snapshot(self) -> WorkspaceSnapshot:
        return WorkspaceSnapshot(
            workspace=self._workspace,
            root=self.workspace_root(),
            notes=self.workspace_notes(),
        )

    def set_workspace(self, workspace: Workspace) -> None:
        self._workspace = workspace

    def workspace_root(self) -> str:
        return str(self._workspace.root)

    def workspace_notes(self) -> list[str]:
        notes = []
        if self._workspace.warnings.missing_cargo_toml:
            notes.append("Workspace root does not contain Cargo.toml.")
        return notes