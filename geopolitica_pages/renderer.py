"""Render planned pages into HTML documents with Jinja templates.

The renderer is the only place that knows about markup. It receives a
:class:`~geopolitica_pages.planner.PageRecord` plus a page-specific payload and
returns a complete HTML document. Templates live under
``geopolitica_pages/templates`` unless a custom directory is supplied.

>>> import datetime as dt
>>> from geopolitica_pages.config import SiteMeta
>>> renderer = PageRenderer(SiteMeta(), build_time=dt.datetime(2025, 3, 1, tzinfo=dt.UTC))
>>> renderer.build_version
'1740787200000'
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown
from markupsafe import Markup

from .planner import PageKind
from .slug import normalize

if typ.TYPE_CHECKING:
    from .config import SiteMeta
    from .planner import PageRecord

KIND_TEMPLATES: dict[PageKind, str] = {
    PageKind.HOME: "home.jinja",
    PageKind.SECTION_INDEX: "sections_index.jinja",
    PageKind.SECTION: "section.jinja",
    PageKind.SECTION_TOPIC: "topic.jinja",
    PageKind.ARTICLE: "article.jinja",
}

DEFAULT_ARTICLE_BODY = """\
## Introduzione

Questo articolo rappresenta un esempio di contenuto esteso per testare il
layout e la leggibilità del sito. I contenuti reali verranno sostituiti
successivamente con analisi approfondite e articoli originali.

## Analisi del contesto

Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor
incididunt ut labore et dolore magna aliqua.

### Sottosezione importante

Nemo enim ipsam voluptatem quia voluptas sit aspernatur aut odit aut fugit.

## Implicazioni e prospettive

At vero eos et accusamus et iusto odio dignissimos ducimus qui blanditiis
praesentium voluptatum deleniti atque corrupti.

## Conclusioni

Questo articolo di prova dimostra come il layout si comporta con contenuti più
lunghi e strutturati.
"""


def format_it_date(value: dt.date) -> str:
    """Format ``value`` the way Italian locales print short dates (d/m/yyyy)."""
    return f"{value.day}/{value.month}/{value.year}"


def render_markdown(text: str) -> Markup:
    """Render article Markdown into trusted HTML."""
    return Markup(markdown(text, extensions=["sane_lists", "tables"]))


class PageRenderer:
    """Turn page records and their payloads into HTML documents."""

    def __init__(
        self,
        site: SiteMeta,
        *,
        build_time: dt.datetime,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        site : SiteMeta
            Site-wide copy (name, hero text, footer note, language).
        build_time : datetime.datetime
            Instant the build runs at. Drives the footer year and the
            stylesheet cache-busting version, so output is reproducible when
            the same instant is supplied.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``geopolitica_pages/templates``.
        """
        self.site = site
        self.build_time = build_time
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["it_date"] = format_it_date
        self.env.filters["markdown"] = render_markdown
        self.env.filters["slug"] = normalize

    @property
    def build_version(self) -> str:
        """Return the millisecond timestamp appended to the stylesheet URL."""
        return str(int(self.build_time.timestamp() * 1000))

    def template_name(self, record: PageRecord) -> str:
        """Return the template used for ``record``."""
        if record.kind in (PageKind.FLAT_LIST, PageKind.STATIC):
            return f"pages/{record.name}.jinja"
        return KIND_TEMPLATES[record.kind]

    def render(self, record: PageRecord, **payload: typ.Any) -> str:
        """Render ``record`` with its page-specific ``payload``.

        Returns
        -------
        str
            The HTML document, always terminated by a newline.
        """
        template = self.env.get_template(self.template_name(record))
        context = {
            "site": self.site,
            "page": record,
            "prefix": record.link_prefix,
            "url": record.url_for,
            "build_version": self.build_version,
            "year": self.build_time.year,
            "default_article_body": DEFAULT_ARTICLE_BODY,
            **payload,
        }
        html = template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html


__all__ = [
    "DEFAULT_ARTICLE_BODY",
    "KIND_TEMPLATES",
    "PageRenderer",
    "format_it_date",
    "render_markdown",
]
