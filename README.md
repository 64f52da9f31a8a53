# ra_mcp

Building blocks for a tool server that exposes rust-analyzer results to coding
agents. The package has no third-party dependencies.

## Modules

- `ra_mcp.workspace`: `Workspace` wraps an existing directory and resolves it
  to its canonical path (`Workspace.root`). `Workspace.warnings` reports whether
  the root lacks a `Cargo.toml`. `resolve_existing_file` resolves a relative or
  absolute path to an existing file inside the workspace. `uri_for_file` returns
  a `file://` URI for such a file. `classify_url` and `classify_lsp_uri` return
  a `ClassifiedLocation` whose `kind` is a `LocationKind` (`workspace`,
  `external_dependency_source` or `non_file_uri`). `is_rust_file` checks for an
  `.rs` extension. All errors raised here subclass `WorkspaceError`:
  `WorkspaceMissingError`, `WorkspaceNotDirectoryError`, `FileMissingError`,
  `OutsideWorkspaceError`, `NotAFileError` and `InvalidFileUriError`.
- `ra_mcp.params`: dataclasses for the parameters of each tool, such as
  `HoverParams`, `DefinitionParams`, `ReferencesParams`, `CompletionParams`,
  `InlayHintsParams`, `CodeActionsParams`, `RenamePreviewParams`,
  `DiagnosticsParams` and `WorkspaceDiagnosticsParams`. The module also holds
  the default limits (for example `DEFAULT_MAX_RESULTS = 50` and
  `DEFAULT_MAX_INLAY_HINTS = 200`). `schema_for` builds a JSON schema for a
  parameter class. `validate_rename_name` raises `ValueError` for blank names
  and for names that start with `-`.
- `ra_mcp.response`: `ToolEnvelope` and the `success`, `failure` and
  `envelope_text` functions. Each returns pretty-printed JSON with the keys
  `ok`, `tool`, `workspace_root`, `input`, `result`, `notes` and `truncated`.
  Failures also carry `error` and `hint`. Output is capped at
  `DEFAULT_MAX_TOTAL_OUTPUT_BYTES` (120,000 bytes). When a response is larger,
  it is shrunk step by step: the result is replaced first, then the input is
  dropped and strings are shortened, and as a last resort a minimal error object
  is returned.
- `ra_mcp.state`: `ServerConfig` (`cargo_tools_enabled`, on by default) and
  `ServerState`. `ServerState` holds the active workspace and hands out a
  `WorkspaceSnapshot` with its root and notes.
- `ra_mcp.inlay_hints`: `max_hints_value`, `request_range`,
  `parse_kind_filters`, `read_source_lines`, `format_inlay_hints`, `label_text`
  and `kind_name`. Hints are filtered by `InlayHintKindFilter`, sorted by
  position, capped, and grouped by source line into a `FormattedInlayHints`.
- `ra_mcp.completion.completion_items`: summarises completion items and counts
  them.
- `ra_mcp.diagnostics.diagnostic_summary`: counts diagnostics by severity.
- `ra_mcp.navigation`: `definition_locations` flattens definition responses
  into `(uri, range)` pairs. `references_truncated` reports whether a reference
  list exceeds the limit.
- `ra_mcp.symbols.document_symbols_result`: wraps a document symbol response.
- `ra_mcp.edits`: `summarize_code_actions`, and `summarize_workspace_edit`,
  which returns a `WorkspaceEditSummary` of document, change and
  resource-operation counts.

The reshaping functions take language-server responses as plain
JSON-decoded dictionaries and lists, with LSP field names such as `position`,
`paddingLeft`, `insertText`, `targetUri` and `documentChanges`.

## Install

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Example

```python
from ra_mcp.workspace import Workspace
from ra_mcp.params import HoverParams
from ra_mcp.response import success

workspace = Workspace("path/to/crate")
params = HoverParams(file_path="src/lib.rs", line=0, character=3)
file = workspace.resolve_existing_file(params.file_path)

print(success("ra_hover", str(workspace.root), params,
              {"file_uri": workspace.uri_for_file(file)}, [], False))
```

This example validates inlay hints and groups them by line:

```python
from ra_mcp.inlay_hints import (
    format_inlay_hints, max_hints_value, parse_kind_filters, request_range,
)

lines = ["let value = 42;"]
_, shown_range = request_range(lines, None, None)
formatted = format_inlay_hints(
    "src/lib.rs", shown_range, lines,
    [{"position": {"line": 0, "character": 9}, "label": ": i32", "kind": 1}],
    parse_kind_filters(["type"]), max_hints_value(None), False,
)
print(formatted.result["groups"])
```

Bad input raises `ValueError`. Workspace problems raise subclasses of
`WorkspaceError`.

## What this package does not do

The package has no server, no command to run, and no client that talks to
rust-analyzer. It does not run cargo either. It validates input, resolves
workspace paths, and turns responses you already have into JSON tool results.
Starting rust-analyzer, sending requests to it, and serving tools over stdio
are left to the program that uses these modules.