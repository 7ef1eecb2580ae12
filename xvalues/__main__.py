"""
CLI interface for xvalues.

Usage:
    python -m xvalues [-b | -B] [value ...]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
