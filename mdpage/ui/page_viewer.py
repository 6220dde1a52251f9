from __future__ import annotations

from PyQt6.QtWidgets import QMainWindow, QTextBrowser

from mdpage.domain.models import PageDocument
from mdpage.services.page_renderer import StaticPageRenderer
from mdpage.utils.constants import APP_NAME


class PageViewer(QMainWindow):
    """Read-only window whose central QTextBrowser is the page's visible region."""

    def __init__(self, renderer: StaticPageRenderer, *, app_title: str = APP_NAME) -> None:
        super().__init__()
        self.setWindowTitle(app_title)
        self.resize(900, 700)

        self.renderer = renderer
        self._app_title = app_title
        self.page: PageDocument | None = None

        self.preview = QTextBrowser(self)
        # In-document anchors scroll in place; everything else opens externally.
        self.preview.setOpenExternalLinks(True)
        self.setCentralWidget(self.preview)

    def show_page(self, page: PageDocument) -> None:
        if not page.rendered:
            self.renderer.render(page)
        self.page = page
        # QTextBrowser would display the hidden source region, so leave it out.
        self.preview.setHtml(self.renderer.to_document(page, embed_source=False))
        self.setWindowTitle(f"{page.title} - {self._app_title}")
