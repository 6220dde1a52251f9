from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from mdpage.domain.models import Conversion, PageDocument


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to an HTML body fragment."""

    def to_html(self, markdown_text: str) -> str: ...
    def convert(self, markdown_text: str) -> Conversion: ...


class IHighlighter(Protocol):
    """Decorate every code block of an HTML fragment in place."""

    def highlight_all(self, html: str) -> str: ...
    def stylesheet(self) -> str: ...


class IFileService(Protocol):
    """Read/write text files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_text_atomic(self, path: Path, text: str) -> None: ...


@runtime_checkable
class IConfigService(Protocol):
    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
    def get_list(self, section: str, key: str, default: list[str] | None = None) -> list[str]: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


@runtime_checkable
class IAppConfig(IConfigService, Protocol):
    def get_version(self) -> str: ...


class IExporter(ABC):
    """Export strategy interface. Implementations write a rendered page to a path."""

    name: str  # e.g. "html", "fragment"
    label: str  # e.g. "Full HTML document"
    file_ext: str = "html"

    @abstractmethod
    def export(self, page: PageDocument, out_path: Path) -> None:
        """Perform export. 'page' may be unrendered; exporters render on demand."""
        raise NotImplementedError


class IExporterRegistry(Protocol):
    def register(self, e: IExporter) -> None: ...
    def get(self, name: str) -> IExporter: ...
    def all(self) -> list[IExporter]: ...
    def names(self) -> list[str]: ...
    def export(self, name: str, page: PageDocument, out_path: Path) -> Path: ...
