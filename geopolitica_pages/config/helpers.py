"""Utility helpers shared by the content and article loaders."""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ

logger = logging.getLogger(__name__)


def _string_list(value: object) -> tuple[str, ...]:
    """Coerce ``value`` into a tuple of strings, or an empty tuple.

    Lists keep their order and every item is passed through ``str``; ``None``
    items are skipped. Any other shape yields an empty tuple.
    """
    match value:
        case list() | tuple() as items:
            return tuple(str(item) for item in items if item is not None)
        case _:
            return ()


def _unique_list(values: tuple[str, ...], *, owner: str) -> tuple[str, ...]:
    """Drop exact duplicates from ``values`` while keeping first occurrences."""
    seen: set[str] = set()
    unique: list[str] = []
    for value in values:
        if value in seen:
            logger.warning("Duplicate entry '%s' in %s ignored.", value, owner)
            continue
        seen.add(value)
        unique.append(value)
    return tuple(unique)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_date(value: dt.date | str | None) -> dt.date | None:
    """Return a calendar date parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            try:
                return dt.date.fromisoformat(sanitized[:10])
            except ValueError:
                return None
        case _:
            return None


def _mapping(value: object) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise an empty dict."""
    match value:
        case dict():
            return value
        case _:
            return {}


__all__ = [
    "_mapping",
    "_optional_str",
    "_parse_date",
    "_string_list",
    "_unique_list",
]
