from __future__ import annotations

from mdpage.cli import main as cli_main


def main() -> int:
    """Module entrypoint for `python -m mdpage.main` or `python -m mdpage` (via __main__)."""
    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
