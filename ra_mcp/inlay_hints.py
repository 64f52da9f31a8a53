"""Validation of inlay hint requests and grouping of returned hints by source line."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from ra_mcp.params import DEFAULT_MAX_INLAY_HINTS, MAX_INLAY_HINTS

_LSP_KIND_TYPE = 1
_LSP_KIND_PARAMETER = 2


class InlayHintKindFilter(enum.Enum):
    """The kinds of inlay hint a caller may ask for."""

    TYPE = "type"
    PARAMETER = "parameter"
    OTHER = "other"


@dataclass
class FormattedInlayHints:
    """The tool result for a set of inlay hints, with notes and a truncation flag."""

    result: dict
    notes: list[str] = field(default_factory=list)
    truncated: bool = False


def max_hints_value(value: int | None) -> int:
    """Return the hint limit to use, rejecting values outside 1..MAX_INLAY_HINTS."""
    if value is None:
        value = DEFAULT_MAX_INLAY_HINTS
    if not 1 <= value <= MAX_INLAY_HINTS:
        raise ValueError(f"max_hints must be between 1 and {MAX_INLAY_HINTS}")
    return value


def _position(line: int, character: int) -> dict:
    return {"line": line, "character": character}


def request_range(
    source_lines: list[str], start_line: int | None, end_line: int | None
) -> tuple[dict, dict]:
    """Map optional inclusive line bounds to an LSP range and its display form."""
    if start_line is None and end_line is None:
        end = len(source_lines)
        display_end = max(end - 1, 0)
        return (
            {"start": _position(0, 0), "end": _position(end, 0)},
            {"start_line": 0, "end_line": display_end},
        )
    if start_line is None or end_line is None:
        raise ValueError("start_line and end_line must be supplied together")
    if not source_lines:
        raise ValueError("selected ranges require a non-empty file")
    if start_line > end_line:
        raise ValueError("start_line must be less than or equal to end_line")
    line_count = len(source_lines)
    if not (0 <= start_line < line_count and 0 <= end_line < line_count):
        raise ValueError("start_line and end_line must be valid zero-based line numbers")
    return (
        {"start": _position(start_line, 0), "end": _position(end_line + 1, 0)},
        {"start_line": start_line, "end_line": end_line},
    )


def parse_kind_filters(
    kinds: Iterable[str] | None,
) -> frozenset[InlayHintKindFilter] | None:
    """Parse requested kind names; no names at all means no filtering."""
    if kinds is None:
        return None
    names = list(kinds)
    if not names:
        return None
    filters = set()
    for name in names:
        try:
            filters.add(InlayHintKindFilter(name))
        except ValueError:
            raise ValueError(
                f"unknown inlay hint kind '{name}'; expected type, parameter, or other"
            ) from None
    return frozenset(filters)


def _kind_filter_for(kind: int | None) -> InlayHintKindFilter:
    if kind == _LSP_KIND_TYPE:
        return InlayHintKindFilter.TYPE
    if kind == _LSP_KIND_PARAMETER:
        return InlayHintKindFilter.PARAMETER
    return InlayHintKindFilter.OTHER


def kind_name(kind: int | None) -> str:
    """Name an LSP inlay hint kind as 'type', 'parameter' or 'other'."""
    return _kind_filter_for(kind).value


def label_text(label: str | list[dict]) -> str:
    """Render an inlay hint label given as a string or as a list of label parts."""
    if isinstance(label, str):
        return label
    return "".join(part.get("value", "") for part in label)


def read_source_lines(path: str | Path) -> list[str]:
    """Read a file as a list of lines without their line terminators."""
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def format_inlay_hints(
    file_path: str,
    range: dict,
    source_lines: list[str],
    hints: Iterable[dict],
    filters: frozenset[InlayHintKindFilter] | set[InlayHintKindFilter] | None,
    max_hints: int,
    include_raw: bool,
) -> FormattedInlayHints:
    """Filter, sort, cap and group LSP inlay hints by the line they appear on."""
    filtered = [
        hint
        for hint in hints
        if filters is None or _kind_filter_for(hint.get("kind")) in filters
    ]
    filtered.sort(key=lambda hint: (hint["position"]["line"], hint["position"]["character"]))

    total = len(filtered)
    truncated = total > max_hints
    selected = filtered[:max_hints]

    groups: dict[int, dict] = {}
    for hint in selected:
        line = hint["position"]["line"]
        summary = {
            "character": hint["position"]["character"],
            "label": label_text(hint.get("label", "")),
            "kind": kind_name(hint.get("kind")),
            "padding_left": bool(hint.get("paddingLeft") or False),
            "padding_right": bool(hint.get("paddingRight") or False),
        }
        group = groups.get(line)
        if group is None:
            text = source_lines[line] if 0 <= line < len(source_lines) else ""
            groups[line] = {"line": line, "text": text, "hints": [summary]}
        else:
            group["hints"].append(summary)

    notes = []
    if total == 0:
        notes.append(
            "No inlay hints returned. rust-analyzer may still be indexing, "
            "or the selected range has no hints."
        )
    if truncated:
        notes.append(
            f"Returned {max_hints} of {total} inlay hints; use a narrower range "
            f"or higher max_hints up to {MAX_INLAY_HINTS}."
        )

    result: dict[str, Any] = {
        "file_path": file_path,
        "range": range,
        "total": total,
        "returned": len(selected),
        "groups": list(groups.values()),
    }
    if include_raw:
        result["raw_hints"] = copy.deepcopy(selected)

    return FormattedInlayHints(result=result, notes=notes, truncated=truncated)