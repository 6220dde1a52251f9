from __future__ import annotations

from PyQt6.QtWidgets import QApplication

from mdpage.di.container import Container
from mdpage.domain.models import PageSource
from mdpage.utils.constants import APP_NAME


def run_preview(container: Container, source: PageSource, argv: list[str] | None = None) -> int:
    """
    Bootstraps Qt, renders the page once and shows it in the viewer window.
    """
    QApplication.setApplicationName(APP_NAME)
    app = QApplication.instance() or QApplication(argv or [APP_NAME])

    win = container.build_viewer(app_title=APP_NAME)
    win.show_page(container.page_renderer.load(source))
    win.show()

    return app.exec()
