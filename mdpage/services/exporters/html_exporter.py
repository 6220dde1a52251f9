from __future__ import annotations

from pathlib import Path

from mdpage.domain.interfaces import IExporter, IFileService
from mdpage.domain.models import PageDocument
from mdpage.services.page_renderer import StaticPageRenderer


class HtmlExporter(IExporter):
    """Standalone document: inline styles plus the embedded Markdown source."""

    name = "html"
    label = "Full HTML document"

    def __init__(self, renderer: StaticPageRenderer, files: IFileService) -> None:
        self._renderer = renderer
        self._files = files

    def export(self, page: PageDocument, out_path: Path) -> None:
        self._files.write_text_atomic(out_path, self._renderer.to_document(page))


class FragmentExporter(IExporter):
    """Only the rendered content region, for embedding into another page."""

    name = "fragment"
    label = "HTML fragment"

    def __init__(self, renderer: StaticPageRenderer, files: IFileService) -> None:
        self._renderer = renderer
        self._files = files

    def export(self, page: PageDocument, out_path: Path) -> None:
        if not page.rendered:
            self._renderer.render(page)
        self._files.write_text_atomic(out_path, page.content)
