"""Plan output paths and link prefixes for every page of the site."""

from .models import PageKind, PagePlacement, PageRecord
from .paths import (
    article_page,
    link_prefix_for,
    placement_for,
    root_page,
    section_page,
    topic_page,
)
from .tree import build_page_tree

__all__ = [
    "PageKind",
    "PagePlacement",
    "PageRecord",
    "article_page",
    "build_page_tree",
    "link_prefix_for",
    "placement_for",
    "root_page",
    "section_page",
    "topic_page",
]
