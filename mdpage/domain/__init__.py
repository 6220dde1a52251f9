"""Domain layer: interfaces, simple models (dataclasses) and errors."""

from .errors import ConfigError, MdPageError, PageSourceError, SiteBuildError
from .interfaces import (
    IExporter,
    IFileService,
    IHighlighter,
    IMarkdownRenderer,
)
from .models import Conversion, PageDocument, PageSource, RenderState

__all__ = [
    "IMarkdownRenderer",
    "IHighlighter",
    "IFileService",
    "IExporter",
    "Conversion",
    "PageSource",
    "PageDocument",
    "RenderState",
    "ConfigError",
    "MdPageError",
    "PageSourceError",
    "SiteBuildError",
]
