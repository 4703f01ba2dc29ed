"""Walk the content model once and plan every output page.

:func:`build_page_tree` is the contract between the content loaders and the
renderer. It returns records in a stable order (root pages, then each section
followed by its sub-topics, then articles) and guarantees that no two records
share an output path before anything is written to disk.
"""

from __future__ import annotations

import logging
import typing as typ

from geopolitica_pages._constants import (
    FLAT_LIST_PAGES,
    HOME_PAGE,
    PAGE_TITLES,
    SECTION_INDEX_PAGE,
    STATIC_PAGES,
)
from geopolitica_pages.config import SlugCollisionError

from .models import PageKind, PageRecord
from .paths import article_page, root_page, section_page, topic_page

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from geopolitica_pages.config import Article, ContentTree

logger = logging.getLogger(__name__)


def build_page_tree(
    content: ContentTree, articles: cabc.Sequence[Article]
) -> list[PageRecord]:
    """Plan every page of the site.

    Parameters
    ----------
    content : ContentTree
        Sections, sub-topics, and flat lists loaded from ``core.json``.
    articles : Sequence[Article]
        Articles in publication order; never modified.

    Returns
    -------
    list[PageRecord]
        One record per output page, in emission order.

    Raises
    ------
    EmptySlugError
        If a section, sub-topic, or article yields an empty slug.
    UnsafeSlugError
        If an article slug is not a plain file name.
    SlugCollisionError
        If two content nodes resolve to the same output path.

    Notes
    -----
    Articles naming an unknown section are logged as warnings and keep a
    ``parent_path`` of ``None``; they do not abort the build.
    """
    records = [*_root_records(), *_section_records(content)]
    section_paths = {
        record.section: record.output_path
        for record in records
        if record.kind is PageKind.SECTION
    }
    records.extend(_article_records(articles, section_paths))
    _ensure_unique_paths(records)
    return records


def _root_records() -> cabc.Iterator[PageRecord]:
    """Yield home, section index, flat-list, and fixed static pages."""
    yield _root_record(HOME_PAGE, PageKind.HOME)
    yield _root_record(SECTION_INDEX_PAGE, PageKind.SECTION_INDEX)
    for name in FLAT_LIST_PAGES.values():
        yield _root_record(name, PageKind.FLAT_LIST)
    for name in STATIC_PAGES.values():
        yield _root_record(name, PageKind.STATIC)


def _root_record(name: str, kind: PageKind) -> PageRecord:
    return PageRecord.from_placement(
        root_page(name),
        kind=kind,
        title=PAGE_TITLES.get(name, name),
        source=f"page '{name}'",
        name=name,
    )


def _section_records(content: ContentTree) -> cabc.Iterator[PageRecord]:
    """Yield each section page followed by its sub-topic pages."""
    for section, topics in content.sections.items():
        section_placement = section_page(section)
        yield PageRecord.from_placement(
            section_placement,
            kind=PageKind.SECTION,
            title=section,
            source=f"section '{section}'",
            section=section,
        )
        for topic in topics:
            yield PageRecord.from_placement(
                topic_page(section, topic),
                kind=PageKind.SECTION_TOPIC,
                title=f"{section} · {topic}",
                source=f"sub-topic '{topic}' of section '{section}'",
                section=section,
                topic=topic,
                parent_path=section_placement.output_path,
            )


def _article_records(
    articles: cabc.Sequence[Article], section_paths: dict[str | None, str]
) -> cabc.Iterator[PageRecord]:
    """Yield article pages linked back to their section when it exists."""
    for article in articles:
        parent_path = section_paths.get(article.section)
        if parent_path is None:
            logger.warning(
                "Article '%s' references unknown section '%s'; "
                "its back-link will not resolve.",
                article.slug,
                article.section,
            )
        yield PageRecord.from_placement(
            article_page(article.slug, source=f"Article '{article.title}'"),
            kind=PageKind.ARTICLE,
            title=article.title,
            source=f"article '{article.slug}'",
            section=article.section,
            article=article,
            parent_path=parent_path,
        )


def _ensure_unique_paths(records: cabc.Iterable[PageRecord]) -> None:
    """Raise SlugCollisionError when two records share an output path."""
    owners: dict[str, PageRecord] = {}
    for record in records:
        existing = owners.get(record.output_path)
        if existing is not None:
            raise SlugCollisionError(
                record.output_path, existing.source, record.source
            )
        owners[record.output_path] = record


__all__ = ["build_page_tree"]
