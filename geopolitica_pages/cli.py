"""Cyclopts CLI entrypoint for building the Politica & Geopolitica site.

The ``pages`` console script reads ``core.json`` and the article source,
plans every page, and writes the static site. Typical usage runs
``pages build`` from the project root, which writes the pages next to
``core.json`` so the repository can be served by GitHub Pages.

Examples
--------
Build the site into the current directory:

>>> from geopolitica_pages.cli import main
>>> main()  # doctest: +SKIP

Build into ``public`` with a fixed build date:

>>> from geopolitica_pages.cli import app
>>> app(
...     ["build", "--output-dir", "public", "--build-date", "2025-03-01"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import SiteBuilder
from .config import SiteConfigError, load_articles, load_content_tree

DEFAULT_CONTENT = Path("core.json")
DEFAULT_SRC_DIR = Path("src")

logger = logging.getLogger(__name__)

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def parse_build_time(value: str | None) -> dt.datetime:
    """Parse an ISO date or datetime into an aware UTC datetime.

    ``None`` returns the current time. Naive values are read as UTC.

    Raises
    ------
    SiteConfigError
        If ``value`` is not an ISO 8601 date or datetime.
    """
    if value is None:
        return dt.datetime.now(dt.UTC)
    sanitized = value.strip()
    if sanitized.endswith("Z"):
        sanitized = sanitized[:-1] + "+00:00"
    try:
        parsed = dt.datetime.fromisoformat(sanitized)
    except ValueError as exc:
        msg = f"Invalid build date '{value}'; expected an ISO 8601 date."
        raise SiteConfigError(msg) from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Build the static site from core.json and the article source.")
def build(
    *,
    content: typ.Annotated[
        Path, Parameter(help="Path to the content JSON", env_var="INPUT_CONTENT")
    ] = DEFAULT_CONTENT,
    articles: typ.Annotated[
        Path | None,
        Parameter(
            help="Optional article YAML; the built-in list is used when omitted",
            env_var="INPUT_ARTICLES",
        ),
    ] = None,
    src_dir: typ.Annotated[
        Path,
        Parameter(help="Folder holding styles.css and images/", env_var="INPUT_SRC_DIR"),
    ] = DEFAULT_SRC_DIR,
    output_dir: typ.Annotated[
        Path, Parameter(help="Site root to write to", env_var="INPUT_OUTPUT_DIR")
    ] = Path(),
    build_date: typ.Annotated[
        str | None,
        Parameter(
            help="ISO date or datetime used as the build clock",
            env_var="INPUT_BUILD_DATE",
        ),
    ] = None,
    verbose: bool = False,
) -> None:
    """Build every page of the site and copy its assets.

    Parameters
    ----------
    content : Path, optional
        Content JSON with sections and list pages; defaults to ``core.json``.
    articles : Path or None, optional
        Article YAML file. When ``None`` the built-in article list is used.
    src_dir : Path, optional
        Source folder for ``styles.css`` and ``images/``; defaults to ``src``.
    output_dir : Path, optional
        Site root receiving the generated files; defaults to the cwd.
    build_date : str or None, optional
        Fixed build instant, making the output reproducible. Defaults to now.
    verbose : bool, optional
        Log every rendered page.

    Raises
    ------
    SystemExit
        With status 1 when the content is invalid (for example a slug
        collision). Filesystem errors propagate unchanged.
    """
    _configure_logging(verbose=verbose)
    try:
        build_time = parse_build_time(build_date)
        content_tree = load_content_tree(content)
        article_list = load_articles(articles, today=build_time.date())
        builder = SiteBuilder(
            content_tree,
            article_list,
            output_dir=output_dir,
            src_dir=src_dir,
            build_time=build_time,
        )
        written = builder.run()
    except SiteConfigError as exc:
        logger.error("Build failed: %s", exc)  # noqa: TRY400
        raise SystemExit(1) from exc
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
