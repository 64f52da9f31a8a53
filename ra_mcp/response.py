"""JSON envelopes returned by every tool, with a hard cap on output size."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from typing import Any

DEFAULT_MAX_TOTAL_OUTPUT_BYTES = 120_000


@dataclass
class ToolEnvelope:
    """The stable response shape shared by all tools."""

    ok: bool
    tool: str
    workspace_root: str
    input: Any
    result: Any
    notes: list[str] = field(default_factory=list)
    truncated: bool = False
    error: str | None = None
    hint: str | None = None

    def to_dict(self) -> dict:
        data = {
            "ok": self.ok,
            "tool": self.tool,
            "workspace_root": self.workspace_root,
            "input": self.input,
            "result": self.result,
            "notes": list(self.notes),
            "truncated": self.truncated,
        }
        if self.error is not None:
            data["error"] = self.error
        if self.hint is not None:
            data["hint"] = self.hint
        return data


def _to_json_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    try:
        return json.loads(json.dumps(value))
    except (TypeError, ValueError):
        return None


def success(
    tool: str,
    workspace_root: str,
    input: Any,
    result: Any,
    notes: list[str],
    truncated: bool,
) -> str:
    """Render a successful tool response."""
    return envelope_text(
        ToolEnvelope(
            ok=True,
            tool=tool,
            workspace_root=str(workspace_root),
            input=_to_json_value(input),
            result=result,
            notes=list(notes),
            truncated=truncated,
        )
    )


def failure(tool: str, workspace_root: str, input: Any, error: str, hint: str) -> str:
    """Render a failed tool response with an error and a hint."""
    return envelope_text(
        ToolEnvelope(
            ok=False,
            tool=tool,
            workspace_root=str(workspace_root),
            input=_to_json_value(input),
            result={},
            notes=[],
            truncated=False,
            error=str(error),
            hint=str(hint),
        )
    )


def _serialize(envelope: ToolEnvelope) -> str:
    try:
        return json.dumps(envelope.to_dict(), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as error:
        return json.dumps({"ok": False, "error": str(error)})


def _fits(text: str) -> bool:
    return len(text.encode("utf-8")) <= DEFAULT_MAX_TOTAL_OUTPUT_BYTES


def _truncate_string(value: str, max_bytes: int) -> str:
    encoded = value.encode("utf-8")
    if len(encoded) <= max_bytes:
        return value
    return encoded[:max_bytes].decode("utf-8", errors="ignore") + "..."


def envelope_text(envelope: ToolEnvelope) -> str:
    """Serialise an envelope, shrinking it step by step until it fits the output cap."""
    envelope = dataclasses.replace(envelope, notes=list(envelope.notes))
    text = _serialize(envelope)
    if _fits(text):
        return text

    envelope.truncated = True
    envelope.result = {
        "message": "tool output exceeded max_total_output_bytes",
        "max_total_output_bytes": DEFAULT_MAX_TOTAL_OUTPUT_BYTES,
    }
    envelope.notes.append("Result payload was truncated before serialization.")
    text = _serialize(envelope)
    if _fits(text):
        return text

    envelope.input = None
    envelope.notes = [
        "Response payload was minimized after exceeding max_total_output_bytes."
    ]
    text = _serialize(envelope)
    if _fits(text):
        return text

    envelope.workspace_root = _truncate_string(envelope.workspace_root, 1024)
    if envelope.error is not None:
        envelope.error = _truncate_string(envelope.error, 1024)
    if envelope.hint is not None:
        envelope.hint = _truncate_string(envelope.hint, 1024)
    envelope.notes = []
    text = _serialize(envelope)
    if _fits(text):
        return text

    envelope.workspace_root = _truncate_string(envelope.workspace_root, 128)
    envelope.result = {
        "message": "response exceeded max_total_output_bytes",
        "max_total_output_bytes": DEFAULT_MAX_TOTAL_OUTPUT_BYTES,
    }
    envelope.error = "response exceeded max_total_output_bytes"
    envelope.hint = None
    text = _serialize(envelope)
    if _fits(text):
        return text

    return (
        f'{{"ok":false,"tool":"{envelope.tool}","truncated":true,'
        f'"error":"response exceeded max_total_output_bytes"}}'
    )