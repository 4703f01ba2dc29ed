"""Article source: a YAML file or the built-in editorial list.

Dates may be given explicitly or as ``days_ago`` offsets. Offsets are resolved
against the build date passed in by the caller, so a build is reproducible
when the same date is supplied.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from ruamel.yaml import YAML

from geopolitica_pages._constants import DEFAULT_AUTHOR

from .helpers import _optional_str, _parse_date
from .models import Article, SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

DEFAULT_ARTICLES: tuple[dict[str, typ.Any], ...] = (
    {
        "slug": "prova-prospettive-riforma-istituzionale",
        "title": "Prova · Prospettive di riforma istituzionale",
        "excerpt": (
            "Un articolo di prova per illustrare layout, tipografia e card "
            "minimaliste. Contenuti reali verranno aggiunti successivamente."
        ),
        "days_ago": 0,
        "section": "Politica interna",
        "author": "Redazione",
    },
    {
        "slug": "analisi-sistema-partitico-italiano",
        "title": "Analisi del sistema partitico italiano",
        "excerpt": (
            "Un approfondimento sui partiti politici italiani e le loro "
            "dinamiche interne."
        ),
        "days_ago": 2,
        "section": "Politica interna",
        "author": "Marco Rossi",
    },
    {
        "slug": "relazioni-ue-italia",
        "title": "Le relazioni tra UE e Italia",
        "excerpt": (
            "Analisi delle dinamiche politiche ed economiche tra l'Unione "
            "Europea e l'Italia."
        ),
        "days_ago": 5,
        "section": "Relazioni internazionali",
        "author": "Anna Bianchi",
    },
    {
        "slug": "crisi-energetica-europa",
        "title": "La crisi energetica in Europa",
        "excerpt": (
            "Impatto della crisi energetica sui paesi europei e strategie di "
            "risposta."
        ),
        "days_ago": 7,
        "section": "Economia globale",
        "author": "Luca Verdi",
    },
    {
        "slug": "media-informazione-politica",
        "title": "Media e informazione politica",
        "excerpt": (
            "Il ruolo dei media nella formazione dell'opinione pubblica e "
            "nella politica."
        ),
        "days_ago": 10,
        "section": "Società e cultura politica",
        "author": "Sofia Neri",
    },
    {
        "slug": "storia-democrazia-italiana",
        "title": "Storia della democrazia italiana",
        "excerpt": (
            "Un percorso attraverso la storia democratica dell'Italia dal "
            "dopoguerra a oggi."
        ),
        "days_ago": 12,
        "section": "Storia e prospettive",
        "author": "Giuseppe Bianchi",
    },
)


def load_articles(path: Path | None, *, today: dt.date) -> list[Article]:
    """Load the ordered article list.

    Parameters
    ----------
    path : Path or None
        YAML file holding an ``articles`` list (or a bare list). When
        ``None`` the built-in :data:`DEFAULT_ARTICLES` are used.
    today : datetime.date
        Build date used to resolve ``days_ago`` offsets.

    Returns
    -------
    list[Article]
        Articles in source order.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    SiteConfigError
        If the YAML shape is wrong or an entry is incomplete.
    """
    if path is None:
        return build_articles(list(DEFAULT_ARTICLES), today=today)
    if not path.exists():
        msg = f"Article file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    match loaded:
        case {"articles": list() as entries}:
            pass
        case list() as entries:
            pass
        case None:
            entries = []
        case _:
            msg = f"Article file '{path}' must hold an 'articles' list."
            raise SiteConfigError(msg)
    return build_articles(entries, today=today)


def build_articles(
    entries: list[typ.Any], *, today: dt.date
) -> list[Article]:
    """Build Article objects from raw mapping entries."""
    return [
        _build_article(entry, index=index, today=today)
        for index, entry in enumerate(entries, start=1)
    ]


def _build_article(entry: object, *, index: int, today: dt.date) -> Article:
    """Build a single Article, resolving its date against ``today``."""
    match entry:
        case {"slug": slug, "title": title, "section": section, **rest}:
            pass
        case _:
            msg = f"Article #{index} requires 'slug', 'title', and 'section'."
            raise SiteConfigError(msg)
    if not (title and section):
        msg = f"Article #{index} requires a non-empty 'title' and 'section'."
        raise SiteConfigError(msg)
    return Article(
        slug=str(slug if slug is not None else "").strip(),
        title=str(title),
        excerpt=str(rest.get("excerpt") or ""),
        date=_resolve_date(rest, index=index, today=today),
        section=str(section),
        author=_optional_str(rest.get("author")) or DEFAULT_AUTHOR,
        body=_optional_str(rest.get("body")),
    )


def _resolve_date(
    payload: typ.Mapping[str, typ.Any], *, index: int, today: dt.date
) -> dt.date:
    """Return the explicit ``date`` or ``today`` minus ``days_ago``."""
    if payload.get("date") is not None:
        parsed = _parse_date(payload.get("date"))
        if parsed is None:
            msg = f"Article #{index} has an invalid 'date'."
            raise SiteConfigError(msg)
        return parsed
    try:
        offset = int(payload.get("days_ago", 0) or 0)
    except (TypeError, ValueError) as exc:
        msg = f"Article #{index} requires a numeric 'days_ago'."
        raise SiteConfigError(msg) from exc
    return today - dt.timedelta(days=offset)


__all__ = ["DEFAULT_ARTICLES", "build_articles", "load_articles"]
