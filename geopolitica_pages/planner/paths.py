"""Output path planning for every page category.

Depth is fixed by page category rather than by content nesting: root pages
sit at depth 0, while section, sub-topic, and article pages all sit one
directory down. Sub-topic pages share the ``sezioni/`` directory with their
section (``sezioni/<section>-<topic>.html``) so every page reaches the site
root with a single prefix.

Examples
--------
>>> section_page("Politica interna").output_path
'sezioni/politica-interna.html'
>>> topic_page("Società e cultura politica", "Mass media").output_path
'sezioni/societa-e-cultura-politica-mass-media.html'
>>> root_page("index").link_prefix
'./'
"""

from __future__ import annotations

from geopolitica_pages._constants import ARTICLES_DIR, SECTIONS_DIR
from geopolitica_pages.config import EmptySlugError, UnsafeSlugError
from geopolitica_pages.slug import normalize

from .models import PagePlacement

_PATH_SEPARATORS = ("/", "\\")
_RESERVED_STEMS = frozenset({".", ".."})


def link_prefix_for(depth: int) -> str:
    """Return the relative prefix that climbs ``depth`` directories."""
    if depth <= 0:
        return "./"
    return "../" * depth


def placement_for(output_path: str) -> PagePlacement:
    """Derive depth and link prefix from a root-relative ``output_path``.

    The path is taken as given; callers build it from validated segments.
    """
    depth = output_path.count("/")
    return PagePlacement(
        output_path=output_path, depth=depth, link_prefix=link_prefix_for(depth)
    )


def root_page(name: str) -> PagePlacement:
    """Plan a site-root page such as ``index.html`` or ``contatti.html``."""
    if not name:
        msg = "Root page"
        raise EmptySlugError(msg)
    return placement_for(f"{name}.html")


def section_page(section: str) -> PagePlacement:
    """Plan the page of ``section`` under ``sezioni/``."""
    slug = _required_slug(section, source=f"Section '{section}'")
    return placement_for(f"{SECTIONS_DIR}/{slug}.html")


def topic_page(section: str, topic: str) -> PagePlacement:
    """Plan the combined section and sub-topic page, beside the section page."""
    section_slug = _required_slug(section, source=f"Section '{section}'")
    topic_slug = _required_slug(
        topic, source=f"Sub-topic '{topic}' of section '{section}'"
    )
    return placement_for(f"{SECTIONS_DIR}/{section_slug}-{topic_slug}.html")


def article_page(slug: str, *, source: str = "Article") -> PagePlacement:
    """Plan an article page; ``slug`` is used verbatim as the file stem.

    Raises
    ------
    EmptySlugError
        If ``slug`` is blank.
    UnsafeSlugError
        If ``slug`` contains a path separator or is ``.`` or ``..``, which
        would place the page outside ``articoli/``.
    """
    if not slug.strip():
        msg = f"{source} slug"
        raise EmptySlugError(msg)
    if slug in _RESERVED_STEMS or any(sep in slug for sep in _PATH_SEPARATORS):
        raise UnsafeSlugError(source, slug)
    return placement_for(f"{ARTICLES_DIR}/{slug}.html")


def _required_slug(name: str, *, source: str) -> str:
    """Return the slug of ``name`` or raise when it is empty."""
    slug = normalize(name)
    if not slug:
        raise EmptySlugError(source)
    return slug


__all__ = [
    "article_page",
    "link_prefix_for",
    "placement_for",
    "root_page",
    "section_page",
    "topic_page",
]
