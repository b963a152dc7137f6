"""Entry point: python -m swagoas

Same as the swag-oas console script.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
