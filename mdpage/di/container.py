from __future__ import annotations

from pathlib import Path

from pygments.util import ClassNotFound

from mdpage.domain.errors import ConfigError
from mdpage.domain.interfaces import IAppConfig, IFileService, IHighlighter, IMarkdownRenderer
from mdpage.services.config.app_config import build_app_config
from mdpage.services.exporters.base import ExporterRegistryInst
from mdpage.services.exporters.html_exporter import FragmentExporter, HtmlExporter
from mdpage.services.file_service import FileService
from mdpage.services.highlighter import CodeHighlighter
from mdpage.services.markdown_renderer import MarkdownRenderer
from mdpage.services.page_renderer import StaticPageRenderer
from mdpage.services.site_builder import SiteBuilder
from mdpage.utils.constants import APP_NAME, DEFAULT_EXTENSIONS


class Container:
    """
    Lightweight DI container:
      - Wires default services from configuration if not provided
      - Registers the built-in exporters (html, fragment) in its own registry
    """

    def __init__(
        self,
        config: IAppConfig,
        *,
        converter: IMarkdownRenderer | None = None,
        highlighter: IHighlighter | None = None,
        files: IFileService | None = None,
    ) -> None:
        self.config = config
        self.converter: IMarkdownRenderer = converter or self._build_converter(config)
        self.highlighter: IHighlighter = highlighter or self._build_highlighter(config)
        self.file_service: IFileService = files or FileService()
        self.page_renderer = StaticPageRenderer(
            self.converter,
            self.highlighter,
            embed_source=bool(config.get_bool("render", "embed_source", True)),
        )

        self.exporters = ExporterRegistryInst()
        self.exporters.register(HtmlExporter(self.page_renderer, self.file_service))
        self.exporters.register(FragmentExporter(self.page_renderer, self.file_service))

    @staticmethod
    def _build_converter(config: IAppConfig) -> MarkdownRenderer:
        extensions = config.get_list("render", "extensions", DEFAULT_EXTENSIONS)
        try:
            return MarkdownRenderer(extensions=extensions)
        except (ImportError, AttributeError) as e:
            raise ConfigError("render", "extensions", ", ".join(extensions), str(e)) from e

    @staticmethod
    def _build_highlighter(config: IAppConfig) -> CodeHighlighter:
        style = config.get("highlight", "style", "default") or "default"
        try:
            return CodeHighlighter(
                style=style,
                guess_lang=bool(config.get_bool("highlight", "guess_lang", True)),
                enabled=bool(config.get_bool("highlight", "enabled", True)),
            )
        except ClassNotFound as e:
            raise ConfigError("highlight", "style", style, "unknown Pygments style") from e

    @staticmethod
    def default(config_path: Path | None = None) -> Container:
        return Container(build_app_config(explicit_ini=config_path))

    def build_site_builder(self) -> SiteBuilder:
        return SiteBuilder(
            self.page_renderer,
            self.file_service,
            stylesheet=self.config.get("site", "stylesheet", "style.css") or "style.css",
            theme_stylesheet=self.config.get("site", "theme_stylesheet", "highlight.css")
            or "highlight.css",
            index_title=self.config.get("site", "index_title", "Pages") or "Pages",
        )

    def build_viewer(self, *, app_title: str = APP_NAME):
        # Imported lazily: only the preview command needs QtWidgets.
        from mdpage.ui.page_viewer import PageViewer

        return PageViewer(self.page_renderer, app_title=app_title)
