from __future__ import annotations

import os
from pathlib import Path

import pytest

# Qt widgets in tests never need a real display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from mdpage.domain.models import PageSource  # noqa: E402
from mdpage.services.file_service import FileService  # noqa: E402
from mdpage.services.highlighter import CodeHighlighter  # noqa: E402
from mdpage.services.markdown_renderer import MarkdownRenderer  # noqa: E402
from mdpage.services.page_renderer import StaticPageRenderer  # noqa: E402


@pytest.fixture(autouse=True)
def user_config_path(monkeypatch, tmp_path: Path) -> Path:
    """Point platformdirs at an empty per-test directory so real user config never leaks in."""
    cfg_dir = tmp_path / "usercfg"
    monkeypatch.setattr(
        "mdpage.services.config.ini_config_service.user_config_dir",
        lambda appname: str(cfg_dir),
        raising=True,
    )
    return cfg_dir / "config.ini"


@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


@pytest.fixture()
def highlighter() -> CodeHighlighter:
    return CodeHighlighter()


@pytest.fixture()
def page_renderer(renderer: MarkdownRenderer, highlighter: CodeHighlighter) -> StaticPageRenderer:
    return StaticPageRenderer(renderer, highlighter)


@pytest.fixture()
def file_service() -> FileService:
    return FileService()


@pytest.fixture()
def essay() -> PageSource:
    text = (
        "# Equals and HashCode\n"
        "\n"
        "See [the contract](#the-contract) before overriding *anything*.\n"
        "\n"
        "## The Contract\n"
        "\n"
        "```java\n"
        "@Override\n"
        "public int hashCode() {\n"
        "    return Objects.hash(x, y);\n"
        "}\n"
        "```\n"
        "\n"
        "Equal objects must have equal hash codes: `a.equals(b)` implies the same `hashCode()`.\n"
    )
    return PageSource(text=text, name="equals")
