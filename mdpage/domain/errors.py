from __future__ import annotations

from pathlib import Path


class MdPageError(Exception):
    """Base class for errors raised by mdpage itself."""


class PageSourceError(MdPageError):
    """A Markdown source could not be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read page source {path}: {reason}")
        self.path = path
        self.reason = reason


class SiteBuildError(MdPageError):
    """The site source directory is missing or unusable."""


class ConfigError(MdPageError):
    """A configuration value names something that does not exist."""

    def __init__(self, section: str, key: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid config [{section}] {key} = {value!r}: {reason}")
        self.section = section
        self.key = key
        self.value = value
