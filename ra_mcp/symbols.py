"""Wrapping document symbol responses."""

from __future__ import annotations

from typing import Any


def document_symbols_result(symbols: Any) -> dict:
    """Wrap a document symbol response (or None) as the tool result."""
    return {"symbols": symbols}