"""Load ``core.json`` into a typed :class:`ContentTree`."""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json as msgspec_json

from geopolitica_pages._constants import (
    FLAT_LIST_PAGES,
    HOMEPAGE_KEY,
    SECTIONS_KEY,
    STATIC_PAGES,
)

from .helpers import _mapping, _string_list, _unique_list
from .models import ContentTree, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_content_tree(path: Path) -> ContentTree:
    """Load the JSON document describing sections and list pages.

    Parameters
    ----------
    path : Path
        Filesystem path to the content file (usually ``core.json``).

    Returns
    -------
    ContentTree
        Sections with their sub-topics, the flat lists, and homepage items.
        Missing or wrongly shaped keys are read as empty collections.

    Raises
    ------
    FileNotFoundError
        If the content file does not exist at ``path``.
    SiteConfigError
        If the file is not valid JSON.

    Examples
    --------
    >>> from pathlib import Path
    >>> tree = load_content_tree(Path("core.json"))  # doctest: +SKIP
    >>> list(tree.sections)[:1]  # doctest: +SKIP
    ['Politica interna']
    """
    if not path.exists():
        msg = f"Content file '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        loaded = msgspec_json.decode(path.read_bytes())
    except msgspec.DecodeError as exc:
        msg = f"Content file '{path}' is not valid JSON: {exc}"
        raise SiteConfigError(msg) from exc
    return build_content_tree(loaded)


def build_content_tree(payload: object) -> ContentTree:
    """Build a ContentTree from an already decoded JSON payload."""
    raw = _mapping(payload)
    sections: dict[str, tuple[str, ...]] = {}
    for name, topics in _mapping(raw.get(SECTIONS_KEY)).items():
        sections[str(name)] = _unique_list(
            _string_list(topics), owner=f"section '{name}'"
        )

    flat_lists = {
        key: _string_list(raw.get(key)) for key in (*FLAT_LIST_PAGES, *STATIC_PAGES)
    }
    return ContentTree(
        sections=sections,
        flat_lists=flat_lists,
        homepage=_string_list(raw.get(HOMEPAGE_KEY)),
    )


__all__ = ["build_content_tree", "load_content_tree"]
