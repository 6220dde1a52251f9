"""Exporter strategies and registry."""

from .base import ExporterRegistryInst
from .html_exporter import FragmentExporter, HtmlExporter

__all__ = ["ExporterRegistryInst", "FragmentExporter", "HtmlExporter"]
