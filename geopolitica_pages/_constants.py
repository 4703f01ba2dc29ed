"""Common literal values used across geopolitica_pages.

These constants keep content keys, page names, and output directories
centralized so the loader, planner, renderer, and tests agree on the same
values. Intended for internal use within the geopolitica_pages package.

Examples
--------
>>> from geopolitica_pages import _constants
>>> _constants.SECTIONS_DIR
'sezioni'
>>> _constants.FLAT_LIST_PAGES["Rubriche fisse"]
'rubriche'
"""

HOMEPAGE_KEY = "Homepage"
SECTIONS_KEY = "Sezioni principali"

HOME_PAGE = "index"
SECTION_INDEX_PAGE = "sezioni"

SECTIONS_DIR = "sezioni"
ARTICLES_DIR = "articoli"
IMAGES_DIR = "images"
STYLES_FILE = "styles.css"

FLAT_LIST_PAGES: dict[str, str] = {
    "Rubriche fisse": "rubriche",
    "Approfondimenti": "approfondimenti",
    "Autori": "autori",
}
"""Content keys rendered as list pages, mapped to their page names."""

STATIC_PAGES: dict[str, str] = {
    "Chi siamo": "chi-siamo",
    "Contatti": "contatti",
}
"""Content keys backing the fixed editorial pages, mapped to page names."""

PAGE_TITLES: dict[str, str] = {
    HOME_PAGE: "Homepage",
    SECTION_INDEX_PAGE: "Sezioni",
    "rubriche": "Rubriche",
    "approfondimenti": "Approfondimenti",
    "autori": "Autori",
    "chi-siamo": "Chi siamo",
    "contatti": "Contatti",
}

DEFAULT_FOCUS_TITLE = "Focus del mese"
DEFAULT_AUTHOR = "Redazione"
