from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mdpage.domain.interfaces import IExporter, IExporterRegistry
from mdpage.domain.models import PageDocument

logger = logging.getLogger(__name__)


@dataclass
class ExporterRegistryInst(IExporterRegistry):
    """
    Exporters keyed by output format name, owned by the DI container.

    Unknown names raise ``KeyError`` listing the formats that are registered.
    """

    _reg: dict[str, IExporter] = field(default_factory=dict)

    def register(self, e: IExporter) -> None:
        self._reg[e.name] = e

    def get(self, name: str) -> IExporter:
        try:
            return self._reg[name]
        except KeyError:
            known = ", ".join(self.names()) or "none"
            raise KeyError(f"Unknown export format {name!r} (available: {known})") from None

    def all(self) -> list[IExporter]:
        return list(self._reg.values())

    def names(self) -> list[str]:
        return sorted(self._reg)

    def export(self, name: str, page: PageDocument, out_path: Path) -> Path:
        """Export with the named format. A suffix-less path gets the exporter's extension."""
        exporter = self.get(name)
        if not out_path.suffix:
            out_path = out_path.with_suffix(f".{exporter.file_ext}")
        exporter.export(page, out_path)
        logger.debug("Exported %r as %s to %s", page.source.name, name, out_path)
        return out_path
