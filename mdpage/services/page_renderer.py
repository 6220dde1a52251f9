# mdpage/services/page_renderer.py
from __future__ import annotations

import logging
from collections.abc import Sequence
from html import escape

from mdpage.domain.interfaces import IHighlighter, IMarkdownRenderer
from mdpage.domain.models import PageDocument, PageSource, RenderState
from mdpage.utils.constants import BASE_CSS, HTML_TEMPLATE

logger = logging.getLogger(__name__)


class StaticPageRenderer:
    """
    Runs the render sequence for one page: convert, display, highlight.

    The steps depend on each other strictly in that order; nothing here catches
    errors raised by the converter or the highlighter.
    """

    def __init__(
        self,
        converter: IMarkdownRenderer,
        highlighter: IHighlighter,
        *,
        base_css: str = BASE_CSS,
        embed_source: bool = True,
    ) -> None:
        self.converter = converter
        self.highlighter = highlighter
        self.base_css = base_css
        self.embed_source = embed_source

    # ---------- render sequence ----------

    def load(self, source: PageSource) -> PageDocument:
        return PageDocument(source=source, title=source.name)

    def render(self, page: PageDocument) -> PageDocument:
        conversion = self.converter.convert(page.source.text)
        self.display(page, conversion.html)
        page.content = self.highlighter.highlight_all(page.content)
        page.title = conversion.title or page.source.name
        page.state = RenderState.RENDERED
        logger.debug("Rendered page %r (%d chars)", page.source.name, len(page.content))
        return page

    def display(self, page: PageDocument, html: str) -> None:
        """Replace the page's visible content region."""
        page.content = html

    def render_source(self, source: PageSource) -> PageDocument:
        return self.render(self.load(source))

    # ---------- full document ----------

    def to_document(
        self,
        page: PageDocument,
        *,
        stylesheets: Sequence[str] | None = None,
        embed_source: bool | None = None,
    ) -> str:
        """
        Wrap a page in a complete HTML document.

        With ``stylesheets`` the page links those hrefs; otherwise the base and
        highlight CSS are inlined so the document stands alone.
        """
        if not page.rendered:
            self.render(page)
        embed = self.embed_source if embed_source is None else embed_source

        if stylesheets is None:
            styles = (
                f"<style>{self.base_css}</style>\n"
                f"<style>{self.highlighter.stylesheet()}</style>"
            )
        else:
            styles = "\n".join(
                f'<link rel="stylesheet" href="{escape(href)}" />' for href in stylesheets
            )

        source = ""
        if embed:
            source = (
                '<textarea id="source" hidden readonly>'
                f"{escape(page.source.text, quote=False)}</textarea>\n"
            )

        return HTML_TEMPLATE.format(
            title=escape(page.title),
            styles=styles,
            source=source,
            body=page.content,
        )
