"""Slug normalisation for section, sub-topic, and page names.

The output of :func:`normalize` becomes a filename, so the algorithm is fixed:
lowercase, NFD decomposition, combining marks removed, every run of
characters outside ``[a-z0-9]`` collapsed to one hyphen, then a single
leading and trailing hyphen trimmed.

Examples
--------
>>> normalize("Società e cultura politica")
'societa-e-cultura-politica'
>>> normalize("—")
''
"""

from __future__ import annotations

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize(value: str) -> str:
    """Return the URL-safe slug for ``value``.

    Parameters
    ----------
    value : str
        Human-readable name such as a section or sub-topic title.

    Returns
    -------
    str
        Lowercase ASCII letters, digits, and interior hyphens. Empty when
        ``value`` holds no alphanumeric characters.
    """
    decomposed = unicodedata.normalize("NFD", value.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    hyphenated = _NON_ALNUM.sub("-", stripped)
    if hyphenated.startswith("-"):
        hyphenated = hyphenated[1:]
    if hyphenated.endswith("-"):
        hyphenated = hyphenated[:-1]
    return hyphenated


slugify = normalize

__all__ = ["normalize", "slugify"]
