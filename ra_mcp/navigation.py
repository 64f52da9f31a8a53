"""Normalising definition responses and reference limits."""

from __future__ import annotations


def _pair(location: dict) -> tuple[str, dict]:
    if "targetUri" in location:
        return location["targetUri"], location["targetSelectionRange"]
    return location["uri"], location["range"]


def definition_locations(response: dict | list[dict] | None) -> list[tuple[str, dict]]:
    """Flatten a go-to-definition response into (uri, range) pairs.

    Location links contribute their target URI and target selection range.
    """
    if response is None:
        return []
    if isinstance(response, dict):
        return [_pair(response)]
    return [_pair(location) for location in response]


def references_truncated(total: int, max_results: int) -> bool:
    """Whether more references were found than will be returned."""
    return total > max_results