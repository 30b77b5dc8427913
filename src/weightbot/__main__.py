"""Punto de entrada ``python -m weightbot``."""

from __future__ import annotations

from weightbot.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
