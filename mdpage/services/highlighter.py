# mdpage/services/highlighter.py
from __future__ import annotations

import logging
import re
from html import unescape

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from mdpage.domain.interfaces import IHighlighter

logger = logging.getLogger(__name__)

_CODE_BLOCK_RE = re.compile(
    r"<pre(?P<pre_attrs>[^>]*)><code(?P<code_attrs>[^>]*)>(?P<code>.*?)</code></pre>",
    re.DOTALL | re.IGNORECASE,
)
_TAG_RE = re.compile(r"<[^>]+>")
_CLASS_ATTR_RE = re.compile(r'\bclass="(?P<value>[^"]*)"', re.IGNORECASE)
_LANG_PREFIXES = ("language-", "lang-")


class CodeHighlighter(IHighlighter):
    """
    Pygments-backed "highlight everything" pass over a rendered fragment.

    Every ``<pre><code>`` block is re-emitted as
    ``<pre class="highlight"><code class="language-...">`` with token spans inside.
    Blocks already marked ``highlight`` are left alone, so running the pass twice
    changes nothing.
    """

    def __init__(
        self,
        *,
        style: str = "default",
        guess_lang: bool = True,
        enabled: bool = True,
        css_class: str = "highlight",
    ) -> None:
        self.style = style
        self.guess_lang = guess_lang
        self.enabled = enabled
        self.css_class = css_class
        # Validates the style name up front (raises ClassNotFound for unknown styles).
        self._formatter = HtmlFormatter(style=style, nowrap=True)

    def highlight_all(self, html: str) -> str:
        if not self.enabled:
            return html
        count = 0

        def _sub(m: re.Match) -> str:
            nonlocal count
            pre_classes = _classes(m.group("pre_attrs"))
            if self.css_class in pre_classes:
                return m.group(0)
            count += 1
            return self._highlight_block(
                m.group("pre_attrs"), m.group("code_attrs"), m.group("code")
            )

        out = _CODE_BLOCK_RE.sub(_sub, html)
        logger.debug("Highlighted %d code block(s)", count)
        return out

    def stylesheet(self) -> str:
        return HtmlFormatter(style=self.style).get_style_defs(f".{self.css_class}")

    # -------------------- helpers --------------------

    def _highlight_block(self, pre_attrs: str, code_attrs: str, escaped: str) -> str:
        # Lex the text content only; raw-HTML blocks may carry inline markup.
        code = unescape(_TAG_RE.sub("", escaped))
        lang = language_of(code_attrs)
        lexer = self._lexer_for(lang, code)
        if lang is None and not isinstance(lexer, TextLexer) and lexer.aliases:
            code_attrs = _add_class(code_attrs, f"language-{lexer.aliases[0]}")
        body = highlight(code, lexer, self._formatter)
        return (
            f"<pre{_add_class(pre_attrs, self.css_class, first=True)}>"
            f"<code{code_attrs}>{body}</code></pre>"
        )

    def _lexer_for(self, lang: str | None, code: str) -> Lexer:
        if lang:
            try:
                return get_lexer_by_name(lang)
            except ClassNotFound:
                logger.debug("No lexer for language %r, using plain text", lang)
                return TextLexer()
        if self.guess_lang and code.strip():
            try:
                return guess_lexer(code)
            except ClassNotFound:
                pass
        return TextLexer()


def language_of(attrs: str) -> str | None:
    """Language named by a ``language-*``/``lang-*`` class in an attribute string."""
    for cls in _classes(attrs):
        for prefix in _LANG_PREFIXES:
            if cls.startswith(prefix) and len(cls) > len(prefix):
                return cls[len(prefix) :]
    return None


def _classes(attrs: str) -> list[str]:
    m = _CLASS_ATTR_RE.search(attrs)
    return m.group("value").split() if m else []


def _add_class(attrs: str, cls: str, *, first: bool = False) -> str:
    m = _CLASS_ATTR_RE.search(attrs)
    if not m:
        return f'{attrs} class="{cls}"'
    existing = m.group("value").split()
    merged = [cls, *existing] if first else [*existing, cls]
    return f'{attrs[: m.start()]}class="{" ".join(merged)}"{attrs[m.end() :]}'
