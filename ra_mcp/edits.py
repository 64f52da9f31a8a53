"""Summaries of code actions and workspace edits returned by rust-analyzer."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable

_RESOURCE_OPERATION_KINDS = frozenset({"create", "rename", "delete"})


def _is_command(action: dict) -> bool:
    """A bare LSP Command carries its command identifier as a string."""
    return isinstance(action.get("command"), str)


def summarize_code_actions(actions: Iterable[dict]) -> list[dict]:
    """Condense LSP code actions and commands into compact dictionaries."""
    summaries = []
    for action in actions:
        if _is_command(action):
            summaries.append(
                {
                    "title": action.get("title"),
                    "kind": "command",
                    "command": action["command"],
                    "arguments": action.get("arguments"),
                }
            )
        else:
            summaries.append(
                {
                    "title": action.get("title"),
                    "kind": action.get("kind"),
                    "diagnostics": action.get("diagnostics"),
                    "edit": action.get("edit"),
                    "command": action.get("command"),
                }
            )
    return summaries


@dataclass(frozen=True)
class WorkspaceEditSummary:
    """Counts of touched documents, text changes and file operations in a workspace edit."""

    document_count: int = 0
    change_count: int = 0
    resource_operation_count: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def _is_resource_operation(operation: dict) -> bool:
    return operation.get("kind") in _RESOURCE_OPERATION_KINDS and "textDocument" not in operation


def summarize_workspace_edit(edit: dict | None) -> WorkspaceEditSummary:
    """Count documents, text edits and resource operations in an LSP workspace edit."""
    document_count = 0
    change_count = 0
    resource_operation_count = 0

    if edit:
        changes: dict[str, Any] | None = edit.get("changes")
        if changes is not None:
            document_count += len(changes)
            change_count += sum(len(edits) for edits in changes.values())

        for operation in edit.get("documentChanges") or []:
            if _is_resource_operation(operation):
                resource_operation_count += 1
            else:
                document_count += 1
                change_count += len(operation.get("edits") or [])

    return WorkspaceEditSummary(
        document_count=document_count,
        change_count=change_count,
        resource_operation_count=resource_operation_count,
    )