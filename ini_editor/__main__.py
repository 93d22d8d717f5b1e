"""INI Preset Editor - module entry point (``python -m ini_editor``)."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
