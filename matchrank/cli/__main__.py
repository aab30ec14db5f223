"""
matchrank CLI entry point.

Usage:
    python -m matchrank.cli score "Fred Flintstone" ff
    python -m matchrank.cli rank ba names.txt
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
