"""Unwrapping of upstream response envelopes.

Upstream endpoints answer with different shapes: a bare list, ``{"data": [...]}``,
``{"posts": [...]}``, or a single record optionally wrapped in ``{"data": {...}}``.
These helpers reduce them to one canonical list or record.
"""

from typing import Any

from geopages.core.records import ContentRecord

COLLECTION_KEYS = ("posts", "blogs", "items")


def extract_collection(payload: object) -> list[Any]:
    """Extract the item list from a collection payload.

    Precedence, first match wins: the payload itself when it is a list;
    ``data`` when it is a list; ``posts``, ``blogs``, ``items`` in that order;
    the first list-valued field in iteration order; otherwise an empty list.

    Args:
        payload: Decoded JSON body

    Returns:
        List of raw items (never None)
    """
    if isinstance(payload, list):
        return payload

    if not isinstance(payload, dict):
        return []

    data = payload.get("data")
    if isinstance(data, list):
        return data

    for key in COLLECTION_KEYS:
        value = payload.get(key)
        if isinstance(value, list):
            return value

    for value in payload.values():
        if isinstance(value, list):
            return value

    return []


def unwrap_record(payload: object) -> dict[str, Any] | None:
    """Unwrap one level of ``{"data": {...}}`` around a single record."""
    if not isinstance(payload, dict):
        return None

    data = payload.get("data")
    if isinstance(data, dict):
        return data

    return payload


def normalize_record(payload: object) -> ContentRecord | None:
    """Turn a single-record payload into a ContentRecord.

    Args:
        payload: Decoded JSON body

    Returns:
        ContentRecord, or None when the payload holds no record
    """
    record = unwrap_record(payload)
    if not record:
        return None
    return ContentRecord.from_payload(record)


def normalize_collection(payload: object) -> list[ContentRecord]:
    """Extract a collection and convert every mapping item into a record."""
    return [
        ContentRecord.from_payload(item)
        for item in extract_collection(payload)
        if isinstance(item, dict)
    ]
