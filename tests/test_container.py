from __future__ import annotations

from pathlib import Path

import pytest

from mdpage.di.container import Container
from mdpage.domain.errors import ConfigError
from mdpage.services.config.app_config import build_app_config
from mdpage.services.highlighter import CodeHighlighter
from mdpage.services.site_builder import SiteBuilder


def _config(tmp_path: Path, text: str):
    ini = tmp_path / "mdpage.ini"
    ini.write_text(text, encoding="utf-8")
    return build_app_config(explicit_ini=ini, project_root=tmp_path)


def test_defaults_wire_every_service(tmp_path):
    c = Container(build_app_config(project_root=tmp_path))
    assert isinstance(c.highlighter, CodeHighlighter)
    assert c.highlighter.enabled is True
    assert c.page_renderer.embed_source is True
    assert sorted(e.name for e in c.exporters.all()) == ["fragment", "html"]


def test_config_drives_services(tmp_path):
    c = Container(
        _config(
            tmp_path,
            "[render]\nextensions = fenced_code\nembed_source = no\n"
            "[highlight]\nenabled = false\nstyle = monokai\n"
            "[site]\nindex_title = Essays\nstylesheet = base.css\n",
        )
    )
    assert c.converter.extensions == ["fenced_code"]  # type: ignore[attr-defined]
    assert c.highlighter.enabled is False  # type: ignore[attr-defined]
    assert c.highlighter.style == "monokai"  # type: ignore[attr-defined]
    assert c.page_renderer.embed_source is False

    builder = c.build_site_builder()
    assert isinstance(builder, SiteBuilder)
    assert builder.index_title == "Essays"
    assert builder.stylesheet == "base.css"
    assert builder.theme_stylesheet == "highlight.css"


def test_injected_services_are_used(tmp_path, file_service):
    hl = CodeHighlighter(guess_lang=False)
    c = Container(build_app_config(project_root=tmp_path), highlighter=hl, files=file_service)
    assert c.highlighter is hl
    assert c.page_renderer.highlighter is hl
    assert c.file_service is file_service


def test_build_viewer(qtbot, tmp_path):
    c = Container(build_app_config(project_root=tmp_path))
    viewer = c.build_viewer(app_title="Essays")
    qtbot.addWidget(viewer)
    assert viewer.windowTitle() == "Essays"
    assert viewer.renderer is c.page_renderer


def test_unknown_style_raises_config_error(tmp_path):
    with pytest.raises(ConfigError) as ei:
        Container(_config(tmp_path, "[highlight]\nstyle = nosuchstyle\n"))
    assert (ei.value.section, ei.value.key) == ("highlight", "style")


def test_unknown_extension_raises_config_error(tmp_path):
    with pytest.raises(ConfigError) as ei:
        Container(_config(tmp_path, "[render]\nextensions = extra, nosuchext\n"))
    assert (ei.value.section, ei.value.key) == ("render", "extensions")
    assert "nosuchext" in str(ei.value)
