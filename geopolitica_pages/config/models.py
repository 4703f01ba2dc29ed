"""Typed dataclasses describing the site content model."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata


class SiteConfigError(ValueError):
    """Raised when the site content is invalid or incomplete."""


class SlugCollisionError(SiteConfigError):
    """Raised when two content nodes resolve to the same output path."""

    def __init__(self, output_path: str, first: str, second: str) -> None:
        self.output_path = output_path
        self.first = first
        self.second = second
        msg = f"{first} and {second} both resolve to '{output_path}'."
        super().__init__(msg)


class EmptySlugError(SiteConfigError):
    """Raised when a name normalises to an empty slug."""

    def __init__(self, source: str) -> None:
        self.source = source
        msg = f"{source} has no letters or digits to build a page slug from."
        super().__init__(msg)


class UnsafeSlugError(SiteConfigError):
    """Raised when an article slug would escape the articles directory."""

    def __init__(self, source: str, slug: str) -> None:
        self.source = source
        self.slug = slug
        msg = (
            f"{source} has slug '{slug}', which is not a plain file name; "
            "slugs must not contain path separators or be '.' or '..'."
        )
        super().__init__(msg)


@dc.dataclass(frozen=True, slots=True)
class ContentTree:
    """Sections, sub-topics, and flat lists loaded from ``core.json``.

    Attributes
    ----------
    sections : dict[str, tuple[str, ...]]
        Section names mapped to their sub-topic names, in display order.
    flat_lists : dict[str, tuple[str, ...]]
        Plain string lists keyed by their content key (``"Rubriche fisse"``,
        ``"Autori"``, ...). Missing keys are stored as empty tuples.
    homepage : tuple[str, ...]
        Items listed under the ``Homepage`` key.
    """

    sections: dict[str, tuple[str, ...]] = dc.field(default_factory=dict)
    flat_lists: dict[str, tuple[str, ...]] = dc.field(default_factory=dict)
    homepage: tuple[str, ...] = ()

    def flat_list(self, key: str) -> tuple[str, ...]:
        """Return the items stored under ``key``, or an empty tuple."""
        return self.flat_lists.get(key, ())


@dc.dataclass(frozen=True, slots=True)
class Article:
    """A published article supplied by the article source."""

    slug: str
    title: str
    excerpt: str
    date: dt.date
    section: str
    author: str
    body: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SiteMeta:
    """Site-wide copy shared by every rendered page."""

    site_name: str = "Politica & Geopolitica"
    kicker: str = "Politica · Geopolitica · Economia"
    hero_title: str = "Analisi indipendenti per capire il mondo"
    hero_subtitle: str = (
        "Approfondimenti chiari e verificati su politica interna, relazioni "
        "internazionali e trend globali."
    )
    footer_note: str = "Fonti sempre citate per credibilità."
    lang: str = "it"


__all__ = [
    "Article",
    "ContentTree",
    "EmptySlugError",
    "SiteConfigError",
    "SiteMeta",
    "SlugCollisionError",
    "UnsafeSlugError",
]
