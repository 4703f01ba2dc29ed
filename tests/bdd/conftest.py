"""Shared pytest-bdd steps for the site build behaviour suites.

The steps write a ``core.json`` into ``tmp_path``, optionally register
articles, run :class:`~geopolitica_pages.builder.SiteBuilder` with a fixed
build instant, and inspect the generated tree with BeautifulSoup.
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, then, when

from geopolitica_pages.builder import SiteBuilder
from geopolitica_pages.config import (
    EmptySlugError,
    SiteConfigError,
    SlugCollisionError,
    build_articles,
    load_content_tree,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

BUILD_TIME = dt.datetime(2025, 3, 1, 9, 30, tzinfo=dt.UTC)


@pytest.fixture
def scenario_state(tmp_path: Path) -> dict[str, typ.Any]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {
        "sections": {},
        "articles": [],
        "output_dir": tmp_path / "site",
        "content_path": tmp_path / "core.json",
        "src_dir": tmp_path / "src",
    }


def _run_build(state: dict[str, typ.Any]) -> list[Path]:
    content_path = typ.cast("Path", state["content_path"])
    content_path.write_text(
        json.dumps({"Sezioni principali": state["sections"]}, ensure_ascii=False),
        encoding="utf-8",
    )
    builder = SiteBuilder(
        load_content_tree(content_path),
        build_articles(state["articles"], today=BUILD_TIME.date()),
        output_dir=state["output_dir"],
        src_dir=state["src_dir"],
        build_time=BUILD_TIME,
    )
    return builder.run()


@given(
    parsers.parse(
        'a content file with the section "{section}" and the sub-topic "{topic}"'
    )
)
def given_section_with_topic(
    scenario_state: dict[str, typ.Any], section: str, topic: str
) -> None:
    """Register a single section owning one sub-topic."""
    scenario_state["sections"] = {section: [topic]}


@given(parsers.parse('a content file with only the section "{section}"'))
def given_single_section(scenario_state: dict[str, typ.Any], section: str) -> None:
    """Register a single section without sub-topics."""
    scenario_state["sections"] = {section: []}


@given(parsers.parse('a content file with the sections "{first}" and "{second}"'))
def given_two_sections(
    scenario_state: dict[str, typ.Any], first: str, second: str
) -> None:
    """Register two sections without sub-topics."""
    scenario_state["sections"] = {first: [], second: []}


@given(parsers.parse('an article "{slug}" in section "{section}"'))
def given_article(scenario_state: dict[str, typ.Any], slug: str, section: str) -> None:
    """Append an article entry for ``section`` to the article source."""
    scenario_state["articles"].append(
        {
            "slug": slug,
            "title": slug.replace("-", " ").capitalize(),
            "excerpt": "Estratto di prova.",
            "date": "2025-02-20",
            "section": section,
            "author": "Redazione",
        }
    )


@when("I build the site")
def when_build(
    scenario_state: dict[str, typ.Any], caplog: pytest.LogCaptureFixture
) -> None:
    """Run the build and keep the written paths and captured warnings."""
    with caplog.at_level(logging.WARNING):
        scenario_state["written"] = _run_build(scenario_state)
    scenario_state["warnings"] = [
        record.getMessage()
        for record in caplog.records
        if record.levelno >= logging.WARNING
    ]


@when("I try to build the site")
def when_try_build(scenario_state: dict[str, typ.Any]) -> None:
    """Run the build expecting it to fail and keep the raised error."""
    with pytest.raises(SiteConfigError) as excinfo:
        _run_build(scenario_state)
    scenario_state["error"] = excinfo.value


@then(parsers.parse('the page "{path}" exists'))
def then_page_exists(scenario_state: dict[str, typ.Any], path: str) -> None:
    """Verify the page was written under the output directory."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    assert (output_dir / path).is_file(), f"expected {path} to be written"


@then(parsers.parse('the page "{path}" links to "{href}"'))
def then_page_links_to(
    scenario_state: dict[str, typ.Any], path: str, href: str
) -> None:
    """Verify the page contains an anchor pointing at ``href``."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    soup = BeautifulSoup((output_dir / path).read_text(encoding="utf-8"), "html.parser")
    hrefs = [anchor.get("href") for anchor in soup.find_all("a")]
    assert href in hrefs, f"expected a link to {href} in {path}, got {hrefs}"


@then(parsers.parse('the build fails naming "{first}" and "{second}"'))
def then_build_fails_naming(
    scenario_state: dict[str, typ.Any], first: str, second: str
) -> None:
    """Verify a collision error names both colliding inputs."""
    error = scenario_state["error"]
    assert isinstance(error, SlugCollisionError), f"unexpected error {error!r}"
    assert first in str(error), f"expected '{first}' in {error}"
    assert second in str(error), f"expected '{second}' in {error}"


@then("the build fails with an empty slug error")
def then_build_fails_empty_slug(scenario_state: dict[str, typ.Any]) -> None:
    """Verify the build stopped on an empty slug."""
    error = scenario_state["error"]
    assert isinstance(error, EmptySlugError), f"unexpected error {error!r}"


@then("no page has been written")
def then_nothing_written(scenario_state: dict[str, typ.Any]) -> None:
    """Verify validation failed before the output directory was touched."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    assert not output_dir.exists() or not any(output_dir.iterdir()), (
        "expected no output after a failed build"
    )


@then(parsers.parse('a warning mentions "{text}"'))
def then_warning_mentions(scenario_state: dict[str, typ.Any], text: str) -> None:
    """Verify a logged warning mentions ``text``."""
    warnings = typ.cast("list[str]", scenario_state["warnings"])
    assert any(text in message for message in warnings), (
        f"expected a warning mentioning {text!r}, got {warnings}"
    )
