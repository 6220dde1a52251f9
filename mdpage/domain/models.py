from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class RenderState(Enum):
    UNRENDERED = "unrendered"
    RENDERED = "rendered"


@dataclass(frozen=True)
class PageSource:
    """Pre-authored Markdown text. Never mutated once loaded."""

    text: str
    path: Path | None = None
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.path.stem if self.path else "page")


@dataclass(frozen=True)
class Conversion:
    html: str
    title: str | None = None


@dataclass
class PageDocument:
    """A loaded page: hidden source region plus the visible content region."""

    source: PageSource
    content: str = ""
    title: str = ""
    state: RenderState = field(default=RenderState.UNRENDERED)

    @property
    def rendered(self) -> bool:
        return self.state is RenderState.RENDERED
