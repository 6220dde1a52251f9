# mdpage/services/markdown_renderer.py
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from html import unescape
from typing import Any

import markdown

from mdpage.domain.interfaces import IMarkdownRenderer
from mdpage.domain.models import Conversion
from mdpage.utils.constants import DEFAULT_EXTENSION_CONFIGS, DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)


class MarkdownRenderer(IMarkdownRenderer):
    """
    Converts Markdown to an HTML body fragment.

    Python-Markdown does the actual parsing; this class only fixes the extension
    set. Fenced blocks keep their language as a ``language-*`` class on the
    ``<code>`` element so the highlighter can target them, and ``toc`` gives
    every heading an id so in-document anchors resolve.
    """

    def __init__(
        self,
        extensions: Sequence[str] | None = None,
        extension_configs: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        self.extensions: list[str] = list(extensions or DEFAULT_EXTENSIONS)
        cfg = {k: dict(v) for k, v in DEFAULT_EXTENSION_CONFIGS.items() if k in self.extensions}
        for name, opts in (extension_configs or {}).items():
            cfg.setdefault(name, {}).update(opts)
        self.extension_configs: dict[str, dict[str, Any]] = cfg
        self._md = markdown.Markdown(
            extensions=self.extensions,
            extension_configs=self.extension_configs,
            output_format="html5",
        )

    def to_html(self, markdown_text: str) -> str:
        return self.convert(markdown_text).html

    def convert(self, markdown_text: str) -> Conversion:
        self._md.reset()
        html = self._md.convert(markdown_text)
        title = _first_h1(getattr(self._md, "toc_tokens", []))
        logger.debug("Converted %d chars of markdown (title=%r)", len(markdown_text), title)
        return Conversion(html=html, title=title)


def _first_h1(tokens: list[dict[str, Any]]) -> str | None:
    for tok in tokens:
        if tok.get("level") == 1:
            return unescape(str(tok.get("name", ""))).strip() or None
        found = _first_h1(tok.get("children", []))
        if found:
            return found
    return None
