"""Component adapters, link rewriting and theme stylesheets for CMS pages.

This package exposes the CLI entry points used by ``uv run site-components``
to resolve public link paths, emit the theme-variable stylesheet and render
content exports to static HTML.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from site_components import main
>>> main()  # doctest: +SKIP
>>> from site_components import app
>>> app.name[0]  # doctest: +SKIP
'site-components'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
