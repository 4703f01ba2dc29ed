"""Static-site builder for the Politica & Geopolitica editorial site.

This package exposes the CLI entry points used by ``uv run pages build`` to
turn ``core.json`` and the article source into a tree of static HTML pages.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from geopolitica_pages import main
>>> main()  # doctest: +SKIP
>>> from geopolitica_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
