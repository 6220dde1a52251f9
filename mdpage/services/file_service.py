from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from mdpage.domain.errors import PageSourceError
from mdpage.domain.interfaces import IFileService
from mdpage.domain.models import PageSource

logger = logging.getLogger(__name__)


class FileService(IFileService):
    """Atomic reads/writes for text files."""

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text_atomic(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}")
        sf.write(text.encode("utf-8"))
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
        logger.debug("Wrote %s", path)


def load_page_source(files: IFileService, path: Path) -> PageSource:
    """Read a Markdown file into an immutable PageSource."""
    try:
        text = files.read_text(path)
    except UnicodeDecodeError as e:
        raise PageSourceError(path, f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise PageSourceError(path, e.strerror or str(e)) from e
    return PageSource(text=text, path=path)
