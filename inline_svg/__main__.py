"""CLI entry point for inline_svg package.

Usage:
    python -m inline_svg compile assets/svg -o build/icons.py
    python -m inline_svg render build/icons.py heroicons/user -a class=h-5
    python -m inline_svg list build/icons.py
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
