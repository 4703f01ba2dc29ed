"""Shared fixtures for the geopolitica_pages test suite."""

from __future__ import annotations

import datetime as dt

import pytest

from geopolitica_pages.config import Article, ContentTree, build_content_tree

BUILD_TIME = dt.datetime(2025, 3, 1, 9, 30, tzinfo=dt.UTC)


@pytest.fixture
def build_time() -> dt.datetime:
    """Return the fixed instant used as the build clock."""
    return BUILD_TIME


@pytest.fixture
def content_tree() -> ContentTree:
    """Return a small content tree covering sections, sub-topics, and lists."""
    return build_content_tree(
        {
            "Homepage": ["Ultimi articoli", "Focus del mese: legge elettorale"],
            "Sezioni principali": {
                "Politica interna": ["Governo e Parlamento", "Partiti"],
                "Economia globale": ["Energia"],
                "Società e cultura politica": ["Mass media"],
            },
            "Rubriche fisse": ["Il punto settimanale", "Mappe del potere"],
            "Autori": ["Marco Rossi"],
            "Contatti": ["Newsletter settimanale"],
        }
    )


@pytest.fixture
def articles() -> list[Article]:
    """Return articles in publication order, one per known section."""
    return [
        Article(
            slug="analisi-sistema-partitico-italiano",
            title="Analisi del sistema partitico italiano",
            excerpt="I partiti e le loro dinamiche interne.",
            date=dt.date(2025, 2, 27),
            section="Politica interna",
            author="Marco Rossi",
        ),
        Article(
            slug="crisi-energetica-europa",
            title="La crisi energetica in Europa",
            excerpt="Impatto della crisi energetica sui paesi europei.",
            date=dt.date(2025, 2, 22),
            section="Economia globale",
            author="Luca Verdi",
            body="## Premessa\n\nTesto **in grassetto**.",
        ),
    ]
