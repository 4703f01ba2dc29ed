"""Load and validate the site content for the Politica & Geopolitica build.

This subpackage reads ``core.json`` into a strongly typed
:class:`ContentTree` and the article source into :class:`Article` records.
Malformed shapes are coerced to empty collections; incomplete articles raise
:class:`SiteConfigError`.

Examples
--------
>>> import datetime as dt
>>> from pathlib import Path
>>> from geopolitica_pages.config import load_articles, load_content_tree
>>> tree = load_content_tree(Path("core.json"))  # doctest: +SKIP
>>> articles = load_articles(None, today=dt.date(2025, 3, 1))
>>> articles[0].slug
'prova-prospettive-riforma-istituzionale'
"""

from .articles import DEFAULT_ARTICLES, build_articles, load_articles
from .loader import build_content_tree, load_content_tree
from .models import (
    Article,
    ContentTree,
    EmptySlugError,
    SiteConfigError,
    SiteMeta,
    SlugCollisionError,
    UnsafeSlugError,
)

__all__ = [
    "DEFAULT_ARTICLES",
    "Article",
    "ContentTree",
    "EmptySlugError",
    "SiteConfigError",
    "SiteMeta",
    "SlugCollisionError",
    "UnsafeSlugError",
    "build_articles",
    "build_content_tree",
    "load_articles",
    "load_content_tree",
]
