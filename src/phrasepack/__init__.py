"""
phrasepack - Aggregates package phrase sources and compiles per-locale bundles.
"""

import sys

from .main import main as _main


def main() -> None:
    """Console script entry point."""
    sys.exit(_main())


__all__ = ["main"]
