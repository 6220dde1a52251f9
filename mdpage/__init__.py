"""mdpage: render Markdown documents into static, syntax-highlighted HTML pages."""

__version__ = "0.1.0"
