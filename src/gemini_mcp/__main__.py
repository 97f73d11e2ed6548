"""Allow ``python -m gemini_mcp``."""

from __future__ import annotations

from gemini_mcp.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
