"""Component page rendering pipeline.

This module turns a content tree into HTML. Each child node whose resource
type has a registered adapter is parsed into its view model and rendered
with ``components/<name>.jinja``; the results are assembled by
``page.jinja``, which also links the page's theme stylesheet. Asset fields
pass through the ``publish_url`` filter and page links through the
``check_prop`` global, both applying the URL rewriter for the configured
render mode.

Typical usage mirrors the CLI ``render`` command:

>>> from site_components.content import load_content_tree
>>> from site_components.rewrite import RenderMode, RewriterService
>>> renderer = PageRenderer(RewriterService(), mode=RenderMode.DISABLED)
>>> builder = PageBuilder(
...     load_content_tree(Path("content/home.yaml")),
...     page_path="/content/site/en/home",
...     renderer=renderer,
...     output_dir=Path("public"),
... )  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/content/site/en/home.html')

Templates default to ``site_components/templates``. Jinja2 runs with
autoescape enabled and output files are UTF-8 encoded.
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound
from markupsafe import Markup

from .components import COMPONENT_PARSERS, component_name
from .rewrite import RenderMode, RewriterService, resolve_property
from .theme import theme_stylesheet_href

if typ.TYPE_CHECKING:
    from .content import ContentNode

logger = logging.getLogger(__name__)

PAGE_TITLE_PROPERTIES = ("jcr:title", "title")


class PageRenderer:
    """Render content nodes into HTML with link rewriting applied."""

    def __init__(
        self,
        rewriter: RewriterService,
        *,
        mode: RenderMode = RenderMode.DISABLED,
        templates_dir: Path | None = None,
        is_page: cabc.Callable[[str], bool] | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        rewriter : RewriterService
            Service holding the active URL rewrite rules.
        mode : RenderMode, optional
            Rendering context; links are only rewritten for
            ``RenderMode.DISABLED`` (published output).
        templates_dir : Path, optional
            Directory containing ``page.jinja`` and ``components/``. Defaults
            to the templates shipped with the package.
        is_page : callable, optional
            Predicate recognising internal page paths so that
            ``check_prop`` can append the page extension.
        """
        self.rewriter = rewriter
        self.mode = mode
        self.is_page = is_page
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["publish_url"] = self._publish_url
        self.env.globals["check_prop"] = self._check_prop
        self.template = self.env.get_template("page.jinja")

    def _publish_url(self, internal_url: str | None) -> str:
        return self.rewriter.url_for_mode(internal_url, self.mode) or ""

    def _check_prop(self, name: str, value: typ.Any) -> typ.Any:
        return resolve_property(
            name, value, service=self.rewriter, mode=self.mode, is_page=self.is_page
        )

    def render_component(self, node: ContentNode) -> str | None:
        """Render a single component node, or return ``None`` when unsupported."""
        resource_type = node.resource_type
        parser = COMPONENT_PARSERS.get(resource_type) if resource_type else None
        if parser is None:
            logger.debug("No adapter for node %r (%s)", node.name, resource_type)
            return None
        name = component_name(resource_type)
        try:
            template = self.env.get_template(f"components/{name}.jinja")
        except TemplateNotFound:
            logger.warning("Missing template for component %r", name)
            return None
        return template.render(model=parser(node), node=node)

    def iter_rendered_components(self, node: ContentNode) -> cabc.Iterator[str]:
        """Yield rendered components below ``node`` in document order.

        Children without a resource type are treated as layout containers and
        searched recursively.
        """
        for child in node.iter_children():
            if child.resource_type is None:
                yield from self.iter_rendered_components(child)
                continue
            html = self.render_component(child)
            if html is not None:
                yield html

    def render_page(self, page: ContentNode, *, page_path: str) -> str:
        """Render the full HTML document for ``page``."""
        components = [Markup(html) for html in self.iter_rendered_components(page)]
        title = next(
            (
                text
                for key in PAGE_TITLE_PROPERTIES
                if (text := page.get_str(key))
            ),
            page.name,
        )
        html = self.template.render(
            title=title,
            components=components,
            stylesheet_href=theme_stylesheet_href(page_path),
            mode=self.mode,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html


class PageBuilder:
    """Render a content tree and write the page HTML to disk."""

    def __init__(
        self,
        page: ContentNode,
        *,
        page_path: str,
        renderer: PageRenderer,
        output_dir: Path,
    ) -> None:
        self.page = page
        self.page_path = page_path
        self.renderer = renderer
        self.output_dir = output_dir

    @property
    def output_path(self) -> Path:
        """Return where the rendered page is written."""
        return self.output_dir / f"{self.page_path.strip('/')}.html"

    def run(self) -> Path:
        """Render and write the page HTML, returning the output path.

        Parent directories are created as needed and filesystem errors are
        propagated to the caller.
        """
        output_path = self.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        html = self.renderer.render_page(self.page, page_path=self.page_path)
        output_path.write_text(html, encoding="utf-8")
        return output_path


__all__ = ["PageBuilder", "PageRenderer"]
