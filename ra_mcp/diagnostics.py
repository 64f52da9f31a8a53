"""Counting diagnostics by severity."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

_SEVERITY_KEYS = {1: "errors", 2: "warnings", 3: "information", 4: "hints"}


def diagnostic_summary(diagnostics: Iterable[dict]) -> dict:
    """Count LSP diagnostics by severity; a missing or unknown severity counts as information."""
    diagnostics = list(diagnostics)
    counts = Counter(
        _SEVERITY_KEYS.get(diagnostic.get("severity"), "information")
        for diagnostic in diagnostics
    )
    return {
        "total": len(diagnostics),
        "errors": counts["errors"],
        "warnings": counts["warnings"],
        "information": counts["information"],
        "hints": counts["hints"],
    }