"""Concrete service implementations and export strategies."""

from .file_service import FileService, load_page_source
from .highlighter import CodeHighlighter
from .markdown_renderer import MarkdownRenderer
from .page_renderer import StaticPageRenderer
from .site_builder import SiteBuilder, SiteReport

__all__ = [
    "CodeHighlighter",
    "FileService",
    "MarkdownRenderer",
    "SiteBuilder",
    "SiteReport",
    "StaticPageRenderer",
    "load_page_source",
]
