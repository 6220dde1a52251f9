"""Qt preview of rendered pages."""

from .page_viewer import PageViewer

__all__ = ["PageViewer"]
