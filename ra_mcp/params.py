"""Tool parameter types, their defaults, and JSON schema generation."""

import types
import typing
from dataclasses import dataclass, fields, is_dataclass

DEFAULT_DEFINITION_CONTEXT_LINES = 8
DEFAULT_REFERENCE_CONTEXT_LINES = 4
DEFAULT_MAX_RESULTS = 50
DEFAULT_MAX_INLAY_HINTS = 200
MAX_INLAY_HINTS = 1_000
DEFAULT_DIAGNOSTICS_WAIT_MS = 1_500
DEFAULT_WORKSPACE_DIAGNOSTICS_WAIT_MS = 3_000
DEFAULT_MAX_FILES = 100
DEFAULT_MAX_DIAGNOSTICS = 300
DEFAULT_MAX_SNIPPET_BYTES = 8_192


@dataclass
class SetWorkspaceParams:
    workspace_path: str


@dataclass
class HoverParams:
    file_path: str
    line: int
    character: int


@dataclass
class DefinitionParams:
    file_path: str
    line: int
    character: int
    context_lines: int | None = None
    include_snippets: bool | None = None


@dataclass
class ReferencesParams:
    file_path: str
    line: int
    character: int
    include_declaration: bool | None = None
    max_results: int | None = None
    context_lines: int | None = None
    include_snippets: bool | None = None


@dataclass
class DocumentSymbolsParams:
    file_path: str


@dataclass
class CompletionParams:
    file_path: str
    line: int
    character: int
    max_results: int | None = None


@dataclass
class InlayHintsParams:
    file_path: str
    start_line: int | None = None
    end_line: int | None = None
    kinds: list[str] | None = None
    max_hints: int | None = None
    include_raw: bool | None = None


@dataclass
class FormatParams:
    file_path: str


@dataclass
class CodeActionsParams:
    file_path: str
    line: int
    character: int
    end_line: int
    end_character: int


@dataclass
class RenamePreviewParams:
    file_path: str
    line: int
    character: int
    new_name: str


@dataclass
class DiagnosticsParams:
    file_path: str
    wait_ms: int | None = None


@dataclass
class WorkspaceDiagnosticsParams:
    wait_ms: int | None = None
    max_files: int | None = None
    max_diagnostics: int | None = None


def _split_optional(tp: typing.Any) -> tuple[typing.Any, bool]:
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        nullable = len(args) != len(typing.get_args(tp))
        if len(args) == 1:
            return args[0], nullable
    return tp, False


def _type_schema(tp: typing.Any) -> dict:
    inner, nullable = _split_optional(tp)
    schema: dict
    if inner is bool:
        schema = {"type": "boolean"}
    elif inner is int:
        schema = {"type": "integer", "minimum": 0}
    elif inner is str:
        schema = {"type": "string"}
    elif typing.get_origin(inner) is list:
        (item,) = typing.get_args(inner)
        schema = {"type": "array", "items": _type_schema(item)}
    else:
        raise TypeError(f"unsupported parameter type: {inner!r}")
    if nullable:
        schema["type"] = [schema["type"], "null"]
    return schema


def schema_for(params_cls: type) -> dict:
    """Build a JSON schema object describing a parameter dataclass."""
    if not (isinstance(params_cls, type) and is_dataclass(params_cls)):
        raise TypeError("schema_for expects a dataclass type")
    properties = {}
    required = []
    for item in fields(params_cls):
        tp = item.type
        properties[item.name] = _type_schema(tp)
        if not _split_optional(tp)[1]:
            required.append(item.name)
    return {
        "title": params_cls.__name__,
        "type": "object",
        "properties": properties,
        "required": required,
    }


def validate_rename_name(new_name: str) -> None:
    """Reject rename targets that are blank or look like command-line options."""
    trimmed = new_name.strip()
    if not trimmed:
        raise ValueError("new_name must not be empty or whitespace-only")
    if trimmed.startswith("-"):
        raise ValueError("new_name must not start with '-'")