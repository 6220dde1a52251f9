"""Static site generator for directories of Markdown pages."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from html import escape
from pathlib import Path

from mdpage.domain.errors import SiteBuildError
from mdpage.domain.interfaces import IFileService
from mdpage.domain.models import PageDocument, PageSource, RenderState
from mdpage.services.file_service import load_page_source
from mdpage.services.page_renderer import StaticPageRenderer

logger = logging.getLogger(__name__)

_IGNORED_NAMES = {".DS_Store", "__pycache__", ".pytest_cache"}


@dataclass(frozen=True)
class SiteReport:
    pages: int
    assets: int
    out_dir: Path
    total_bytes: int


class SiteBuilder:
    """Render every ``*.md`` under a source directory into a static HTML site."""

    def __init__(
        self,
        renderer: StaticPageRenderer,
        files: IFileService,
        *,
        stylesheet: str = "style.css",
        theme_stylesheet: str = "highlight.css",
        index_title: str = "Pages",
    ) -> None:
        self.renderer = renderer
        self.files = files
        self.stylesheet = stylesheet
        self.theme_stylesheet = theme_stylesheet
        self.index_title = index_title

    def build(self, src_dir: Path, out_dir: Path) -> SiteReport:
        src_dir = src_dir.resolve()
        out_dir = out_dir.resolve()
        if not src_dir.is_dir():
            raise SiteBuildError(f"Source directory does not exist: {src_dir}")
        if out_dir == src_dir:
            raise SiteBuildError("Output directory must differ from the source directory")
        out_dir.mkdir(parents=True, exist_ok=True)

        sources: list[Path] = []
        assets: list[Path] = []
        for path in sorted(src_dir.rglob("*")):
            if not path.is_file() or path.is_relative_to(out_dir):
                continue
            rel = path.relative_to(src_dir)
            if _ignored(rel):
                continue
            (sources if path.suffix.lower() == ".md" else assets).append(rel)

        written: list[Path] = []

        def _write(rel: Path, text: str) -> None:
            self.files.write_text_atomic(out_dir / rel, text)
            written.append(out_dir / rel)

        # (title, href) for the generated index
        entries: list[tuple[str, str]] = []
        for rel in sources:
            page = self.renderer.render_source(load_page_source(self.files, src_dir / rel))
            target_rel = rel.with_suffix(".html")
            html = self.renderer.to_document(page, stylesheets=self._stylesheet_hrefs(rel))
            _write(target_rel, html)
            entries.append((page.title, target_rel.as_posix()))

        for rel in assets:
            target = out_dir / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src_dir / rel, target)
            written.append(target)

        # Author-supplied stylesheets and index pages win over generated ones.
        rendered = {rel.with_suffix(".html") for rel in sources}
        generated = {
            Path(self.stylesheet): lambda: self.renderer.base_css,
            Path(self.theme_stylesheet): self.renderer.highlighter.stylesheet,
            Path("index.html"): lambda: self._index_page(entries),
        }
        for rel, content in generated.items():
            if rel in rendered:
                continue
            if rel in assets:
                logger.warning("Keeping author-supplied %s instead of generating it", rel)
                continue
            _write(rel, content())

        report = SiteReport(
            pages=len(sources),
            assets=len(assets),
            out_dir=out_dir,
            total_bytes=sum(p.stat().st_size for p in written),
        )
        logger.info(
            "Built site in %s: %d page(s), %d asset(s)", out_dir, report.pages, report.assets
        )
        return report

    def _stylesheet_hrefs(self, rel: Path) -> list[str]:
        prefix = "../" * (len(rel.parts) - 1)
        return [prefix + self.stylesheet, prefix + self.theme_stylesheet]

    def _index_page(self, entries: list[tuple[str, str]]) -> str:
        lines = [f"<h1>{escape(self.index_title)}</h1>", '<ul class="pages">']
        for title, href in entries:
            lines.append(f'<li><a href="{escape(href)}">{escape(title)}</a></li>')
        lines.append("</ul>")
        index = PageDocument(
            source=PageSource(text="", name="index"),
            content="\n".join(lines),
            title=self.index_title,
            state=RenderState.RENDERED,
        )
        return self.renderer.to_document(
            index,
            stylesheets=[self.stylesheet, self.theme_stylesheet],
            embed_source=False,
        )


def _ignored(rel: Path) -> bool:
    return any(part in _IGNORED_NAMES or part.startswith(".") for part in rel.parts)
