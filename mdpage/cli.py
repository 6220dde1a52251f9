"""Command line interface for mdpage."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .di.container import Container
from .domain.errors import MdPageError
from .services.file_service import load_page_source

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mdpage",
        description="Render Markdown documents into static, syntax-highlighted HTML pages.",
    )
    parser.add_argument("--version", action="version", version=f"mdpage {__version__}")
    parser.add_argument("--config", type=Path, help="Explicit config.ini to load")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_render = sub.add_parser("render", help="Render a single Markdown file")
    p_render.add_argument("source", type=Path, help="Markdown file")
    p_render.add_argument("--out", "-o", type=Path, help="Output file (default: stdout)")
    p_render.add_argument(
        "--format",
        "-f",
        choices=["html", "fragment"],
        default="html",
        help="Full HTML document or only the rendered content",
    )

    p_build = sub.add_parser("build", help="Render a directory of Markdown files into a site")
    p_build.add_argument("src", type=Path, help="Directory containing .md files")
    p_build.add_argument(
        "--out", "-o", type=Path, default=Path("./site"), help="Site output directory"
    )

    p_preview = sub.add_parser("preview", help="Open a rendered page in a viewer window")
    p_preview.add_argument("source", type=Path, help="Markdown file")

    args = parser.parse_args(argv)

    if args.config is not None and not args.config.is_file():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 2

    if args.verbose:
        _configure_logging("DEBUG")

    handlers = {"render": _cmd_render, "build": _cmd_build, "preview": _cmd_preview}
    try:
        container = Container.default(args.config)
        if not args.verbose:
            _configure_logging(container.config.get("app", "log_level", "WARNING") or "WARNING")
        return handlers[args.cmd](container, args)
    except (MdPageError, OSError) as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _cmd_render(container: Container, args: Any) -> int:
    renderer = container.page_renderer
    page = renderer.load(load_page_source(container.file_service, args.source))

    if args.out is not None:
        out_path = container.exporters.export(args.format, page, args.out)
        print(f"✓ Page rendered: {out_path}")
        return 0

    renderer.render(page)
    if args.format == "fragment":
        sys.stdout.write(page.content)
    else:
        sys.stdout.write(renderer.to_document(page))
    return 0


def _cmd_build(container: Container, args: Any) -> int:
    report = container.build_site_builder().build(args.src, args.out)
    print("✓ Site generated")
    print(f"  Output: {report.out_dir}")
    print(f"  Pages: {report.pages}")
    print(f"  Assets: {report.assets}")
    print(f"  Size: {report.total_bytes / 1024:.1f} KB")
    return 0


def _cmd_preview(container: Container, args: Any) -> int:
    from .app import run_preview

    source = load_page_source(container.file_service, args.source)
    return run_preview(container, source)


if __name__ == "__main__":
    app()
