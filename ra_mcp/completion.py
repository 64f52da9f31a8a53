"""Condensing completion responses into compact items."""

from __future__ import annotations

from typing import Any


def completion_items(response: list[dict] | dict | None) -> tuple[list[dict], int]:
    """Return summarised completion items and how many the server sent.

    The response may be a list of items, a completion list with an ``items`` field, or None.
    """
    if response is None:
        items: list[dict] = []
    elif isinstance(response, dict):
        items = list(response.get("items") or [])
    else:
        items = list(response)

    values: list[dict[str, Any]] = [
        {
            "label": item.get("label"),
            "kind": item.get("kind"),
            "detail": item.get("detail"),
            "documentation": item.get("documentation"),
            "insert_text": item.get("insertText"),
            "text_edit": item.get("textEdit"),
        }
        for item in items
    ]
    return values, len(items)