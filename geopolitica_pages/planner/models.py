"""Shared dataclasses produced by the page planner."""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

if typ.TYPE_CHECKING:
    from geopolitica_pages.config import Article


class PageKind(enum.StrEnum):
    """Logical category of a generated page."""

    HOME = "home"
    SECTION_INDEX = "sectionIndex"
    SECTION = "section"
    SECTION_TOPIC = "sectionTopic"
    FLAT_LIST = "flatList"
    ARTICLE = "article"
    STATIC = "static"


@dc.dataclass(frozen=True, slots=True)
class PagePlacement:
    """Where a page lives and how it reaches the site root.

    Attributes
    ----------
    output_path : str
        Slash-separated path relative to the site root.
    depth : int
        Number of directories between the page and the site root.
    link_prefix : str
        ``"./"`` at the root, otherwise ``"../"`` repeated ``depth`` times.
    """

    output_path: str
    depth: int
    link_prefix: str


@dc.dataclass(frozen=True, slots=True)
class PageRecord:
    """A planned page handed to the renderer.

    Attributes
    ----------
    kind : PageKind
        Logical page category; selects the template.
    output_path : str
        Slash-separated path relative to the site root.
    depth : int
        Directory depth of ``output_path``.
    link_prefix : str
        Relative prefix addressing the site root from this page.
    title : str
        Human-readable page title.
    source : str
        Description of the content node the page came from.
    name : str | None
        Page name for root-level pages (``"rubriche"``, ``"contatti"``, ...).
    section : str | None
        Owning section name for section, sub-topic, and article pages.
    topic : str | None
        Sub-topic name for combined section and sub-topic pages.
    article : Article | None
        Source article for article pages.
    parent_path : str | None
        Output path of the owning section page; ``None`` when the section is
        unknown or the page has no parent section.
    """

    kind: PageKind
    output_path: str
    depth: int
    link_prefix: str
    title: str
    source: str
    name: str | None = None
    section: str | None = None
    topic: str | None = None
    article: Article | None = None
    parent_path: str | None = None

    @classmethod
    def from_placement(
        cls,
        placement: PagePlacement,
        *,
        kind: PageKind,
        title: str,
        source: str,
        **extra: typ.Any,
    ) -> PageRecord:
        """Build a record for ``placement`` with the given page metadata."""
        return cls(
            kind=kind,
            output_path=placement.output_path,
            depth=placement.depth,
            link_prefix=placement.link_prefix,
            title=title,
            source=source,
            **extra,
        )

    def url_for(self, target_path: str) -> str:
        """Return the link from this page to ``target_path`` (root-relative)."""
        return f"{self.link_prefix}{target_path}"


__all__ = ["PageKind", "PagePlacement", "PageRecord"]
