"""Module entrypoint for running the CLI."""

from __future__ import annotations

from lite_logger.main import main

if __name__ == "__main__":
    raise SystemExit(main())
