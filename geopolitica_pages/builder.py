"""Site build pipeline: plan, copy assets, render, and write every page.

This module wires the content model, the page planner, the asset copier, and
the Jinja renderer into a single run. The main entry point is
:class:`SiteBuilder`:

>>> import datetime as dt
>>> from pathlib import Path
>>> from geopolitica_pages.config import load_articles, load_content_tree
>>> build_time = dt.datetime(2025, 3, 1, tzinfo=dt.UTC)
>>> builder = SiteBuilder(
...     load_content_tree(Path("core.json")),
...     load_articles(None, today=build_time.date()),
...     output_dir=Path("public"),
...     src_dir=Path("src"),
...     build_time=build_time,
... )  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
[PosixPath('public/styles.css'), ...]

Every output path is planned and checked for collisions before the first
file is written. Filesystem errors propagate to the caller.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from ._constants import DEFAULT_FOCUS_TITLE, FLAT_LIST_PAGES, IMAGES_DIR, STATIC_PAGES
from .assets import copy_images, copy_styles
from .config import SiteMeta
from .planner import PageKind, PageRecord, build_page_tree
from .renderer import PageRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import datetime as dt
    from pathlib import Path

    from .config import Article, ContentTree

logger = logging.getLogger(__name__)

FEATURED_ARTICLES = 3
FEATURED_SECTIONS = 4
PAGE_CONTENT_KEYS = {
    name: key for key, name in (*FLAT_LIST_PAGES.items(), *STATIC_PAGES.items())
}


@dc.dataclass(slots=True)
class _PageIndex:
    """Lookups over planned records used to assemble page payloads."""

    sections: dict[str, PageRecord] = dc.field(default_factory=dict)
    topics: dict[str, list[PageRecord]] = dc.field(default_factory=dict)
    articles: list[PageRecord] = dc.field(default_factory=list)
    articles_by_section: dict[str, list[PageRecord]] = dc.field(default_factory=dict)

    @classmethod
    def from_records(cls, records: cabc.Iterable[PageRecord]) -> _PageIndex:
        index = cls()
        for record in records:
            match record.kind:
                case PageKind.SECTION:
                    index.sections[record.section] = record
                    index.topics.setdefault(record.section, [])
                case PageKind.SECTION_TOPIC:
                    index.topics.setdefault(record.section, []).append(record)
                case PageKind.ARTICLE:
                    index.articles.append(record)
                    index.articles_by_section.setdefault(record.section, []).append(
                        record
                    )
        return index


class SiteBuilder:
    """Build the complete static site into an output directory."""

    def __init__(
        self,
        content: ContentTree,
        articles: cabc.Sequence[Article],
        *,
        output_dir: Path,
        src_dir: Path,
        build_time: dt.datetime,
        site: SiteMeta | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        content : ContentTree
            Sections, sub-topics, and flat lists from ``core.json``.
        articles : Sequence[Article]
            Articles in publication order.
        output_dir : Path
            Site root the pages and assets are written to.
        src_dir : Path
            Directory holding the optional ``styles.css`` and ``images/``.
        build_time : datetime.datetime
            Instant the build runs at; passed to the renderer instead of
            reading the wall clock.
        site : SiteMeta, optional
            Site-wide copy; defaults to :class:`SiteMeta`.
        templates_dir : Path, optional
            Custom Jinja template directory.
        """
        self.content = content
        self.articles = list(articles)
        self.output_dir = output_dir
        self.src_dir = src_dir
        self.build_time = build_time
        self.renderer = PageRenderer(
            site or SiteMeta(), build_time=build_time, templates_dir=templates_dir
        )

    def plan(self) -> list[PageRecord]:
        """Return the validated page records without writing anything."""
        return build_page_tree(self.content, self.articles)

    def run(self) -> list[Path]:
        """Plan, copy assets, and render every page to disk.

        Returns
        -------
        list[Path]
            Written files: the stylesheet, copied images, then pages in
            emission order.

        Raises
        ------
        SiteConfigError
            If planning finds an empty slug or a path collision. Nothing is
            written in that case.
        OSError
            If a file cannot be read or written.
        """
        records = self.plan()
        written = [copy_styles(self.src_dir, self.output_dir)]
        written.extend(copy_images(self.src_dir, self.output_dir))

        index = _PageIndex.from_records(records)
        for record in records:
            html = self.renderer.render(record, **self._payload(record, index))
            output_path = self.output_dir / record.output_path
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
            logger.debug("Rendered %s page to %s", record.kind, output_path)
            written.append(output_path)
        logger.info("Build complete: %d pages written.", len(records))
        return written

    def _payload(self, record: PageRecord, index: _PageIndex) -> dict[str, typ.Any]:
        """Return the page-specific template payload for ``record``."""
        match record.kind:
            case PageKind.HOME:
                return {
                    "focus": self._focus_title(),
                    "featured": index.articles[:FEATURED_ARTICLES],
                    "sections": list(index.sections.values())[:FEATURED_SECTIONS],
                    "hero_image": self._has_hero_image(),
                }
            case PageKind.SECTION_INDEX:
                return {
                    "groups": [
                        (section, index.topics.get(name, []))
                        for name, section in index.sections.items()
                    ]
                }
            case PageKind.SECTION:
                return {
                    "topics": index.topics.get(record.section, []),
                    "articles": index.articles_by_section.get(record.section, []),
                }
            case PageKind.SECTION_TOPIC:
                return {
                    "parent": index.sections.get(record.section),
                    "articles": index.articles_by_section.get(record.section, []),
                }
            case PageKind.ARTICLE:
                return {"parent": index.sections.get(record.section)}
            case PageKind.FLAT_LIST | PageKind.STATIC:
                key = PAGE_CONTENT_KEYS.get(record.name or "", "")
                return {"items": self.content.flat_list(key)}
        return {}

    def _focus_title(self) -> str:
        """Return the first homepage item mentioning "focus", or the default."""
        for item in self.content.homepage:
            if "focus" in item.lower():
                return item
        return DEFAULT_FOCUS_TITLE

    def _has_hero_image(self) -> bool:
        return (self.src_dir / IMAGES_DIR / "home_page.jpg").is_file()


__all__ = ["FEATURED_ARTICLES", "FEATURED_SECTIONS", "SiteBuilder"]
