"""Cyclopts CLI entrypoint for the site component toolkit.

The ``site-components`` console script exposes the URL rewriter, the theme
stylesheet generator and the page renderer. Every command reads the same
``config/site.yaml`` file, and options can also be supplied through
``INPUT_*`` environment variables so the tool runs unchanged in CI.

Examples
--------
Resolve a single link for published output:

>>> from site_components.cli import app
>>> app.run(["rewrite", "/content/dam/images/a.png"])  # doctest: +SKIP
/static/assets/images/a.png

Render a content export into ``public/``:

>>> app.run(
...     ["render", "content/home.yaml", "--page-path", "/content/site/en/home"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .content import load_content_tree
from .renderer import PageBuilder, PageRenderer
from .rewrite import RenderMode, RewriterService, is_content_page
from .theme import ThemeStylesheetBuilder, render_theme_css

DEFAULT_CONFIG = Path("config/site.yaml")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(
    name="site-components",
    config=cyclopts.config.Env("INPUT_", command=False),  # type: ignore[unknown-argument]
)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Print the public path for an internal content path.")
def rewrite(
    path: str,
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    mode: typ.Annotated[
        RenderMode, Parameter(help="Rendering context", env_var="INPUT_MODE")
    ] = RenderMode.DISABLED,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Resolve ``path`` against the configured rewrite rules.

    Parameters
    ----------
    path : str
        Internal repository path of the link target.
    config : Path, optional
        Site configuration file; defaults to ``config/site.yaml``.
    mode : RenderMode, optional
        Only ``disabled`` (published output) rewrites; ``edit`` and
        ``preview`` echo the path unchanged.
    verbose : bool, optional
        Log rule loading and each resolution at DEBUG level.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    service = RewriterService()
    service.activate(site_config.rewriter)
    print(service.url_for_mode(path, mode))


@app.command(help="Render the theme-variable stylesheet.")
def theme(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    resource_path: typ.Annotated[
        str | None,
        Parameter(
            help="Content path used to pick a context-aware theme",
            env_var="INPUT_RESOURCE_PATH",
        ),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write the CSS here instead of stdout", env_var="INPUT_OUTPUT"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Print or write the CSS custom properties for a theme context.

    Parameters
    ----------
    config : Path, optional
        Site configuration file; defaults to ``config/site.yaml``.
    resource_path : str or None, optional
        Content path whose closest ``theme_contexts`` entry supplies the
        values. When omitted the site-wide ``theme`` section is used.
    output : Path or None, optional
        Destination file. The CSS is printed to stdout when omitted.
    verbose : bool, optional
        Enable DEBUG logging.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    theme_config = site_config.theme_for(resource_path)
    css = render_theme_css(theme_config)
    if output is None:
        print(css, end="")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(css, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Render a content tree to HTML with its theme stylesheet.")
def render(
    content: Path,
    *,
    page_path: typ.Annotated[
        str | None,
        Parameter(
            help="Repository path of the page (defaults to /content/<file stem>)",
            env_var="INPUT_PAGE_PATH",
        ),
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    mode: typ.Annotated[
        RenderMode, Parameter(help="Rendering context", env_var="INPUT_MODE")
    ] = RenderMode.DISABLED,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render ``content`` into ``<output_dir>/<page_path>.html``.

    The page's theme stylesheet is written next to it so the generated
    ``<link>`` resolves when the output folder is served statically.

    Parameters
    ----------
    content : Path
        YAML content export describing the page and its components.
    page_path : str or None, optional
        Repository path of the page; defaults to ``/content/<content stem>``.
    config : Path, optional
        Site configuration file; defaults to ``config/site.yaml``.
    mode : RenderMode, optional
        Rendering context; links are rewritten only in ``disabled`` mode.
    output_dir : Path or None, optional
        Overrides the configured ``output_dir``.
    verbose : bool, optional
        Enable DEBUG logging.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    target_dir = output_dir or site_config.output_dir
    resolved_page_path = page_path or f"/content/{content.stem}"

    service = RewriterService()
    service.activate(site_config.rewriter)
    renderer = PageRenderer(service, mode=mode, is_page=is_content_page)
    page = load_content_tree(content)
    html_path = PageBuilder(
        page,
        page_path=resolved_page_path,
        renderer=renderer,
        output_dir=target_dir,
    ).run()
    print(f"wrote {_format_path(html_path)}")

    css_path = ThemeStylesheetBuilder(
        site_config.theme_for(resolved_page_path), output_dir=target_dir
    ).run(resolved_page_path)
    print(f"wrote {_format_path(css_path)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``site-components`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
