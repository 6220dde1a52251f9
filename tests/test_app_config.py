# tests/test_app_config.py
from __future__ import annotations

from pathlib import Path

from mdpage import __version__
from mdpage.services.config.app_config import AppConfig, build_app_config


def _write(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


class FakeIni:
    """Minimal IniConfigService-like fake; only what AppConfig calls."""

    def __init__(self, *, version: str = "0.0.0", loaded_from: Path | None = None) -> None:
        self._version = version
        self._loaded_from = loaded_from

    def app_version(self) -> str:
        return self._version

    def get(self, section, key, default=None):
        return default

    def get_int(self, section, key, default=None):
        return default

    def get_bool(self, section, key, default=None):
        return default

    def get_list(self, section, key, default=None):
        return list(default or [])

    def as_dict(self):
        return {}

    @property
    def loaded_from(self):
        return self._loaded_from


def test_version_file_wins(tmp_path):
    _write(tmp_path / "version", "v1.4.2\n")
    cfg = AppConfig(ini=FakeIni(version="9.9.9"), project_root=tmp_path)  # type: ignore[arg-type]
    assert cfg.get_version() == "1.4.2"


def test_invalid_version_file_falls_back_to_ini(tmp_path):
    _write(tmp_path / "version", "not-a-version")
    cfg = AppConfig(ini=FakeIni(version="v2.0.1"), project_root=tmp_path)  # type: ignore[arg-type]
    assert cfg.get_version() == "2.0.1"


def test_package_version_is_last_resort(tmp_path):
    cfg = AppConfig(ini=FakeIni(), project_root=tmp_path)  # type: ignore[arg-type]
    assert cfg.get_version() == __version__


def test_delegates_to_ini(tmp_path):
    marker = tmp_path / "x.ini"
    ini = FakeIni(loaded_from=marker)
    cfg = AppConfig(ini=ini, project_root=tmp_path)  # type: ignore[arg-type]
    assert cfg.get("render", "extensions", "d") == "d"
    assert cfg.get_int("a", "b", 3) == 3
    assert cfg.get_bool("a", "b", True) is True
    assert cfg.get_list("a", "b", ["x"]) == ["x"]
    assert cfg.loaded_from == marker


def test_build_app_config_reads_project_default(tmp_path):
    _write(tmp_path / "config" / "config.ini", "[site]\nindex_title = Essays\n")
    cfg = build_app_config(project_root=tmp_path)
    assert cfg.get("site", "index_title") == "Essays"
    assert cfg.project_root == tmp_path


def test_build_app_config_explicit_ini(tmp_path):
    explicit = tmp_path / "explicit.ini"
    _write(explicit, "[highlight]\nstyle = monokai\n")
    cfg = build_app_config(explicit_ini=explicit, project_root=tmp_path)
    assert cfg.get("highlight", "style") == "monokai"
    assert cfg.loaded_from == explicit
