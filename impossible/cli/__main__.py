"""
Impossible Programs CLI entry point.

Usage:
    python -m impossible.cli demo
    python -m impossible.cli equal f g
    python -m impossible.cli modulus f
    python -m impossible.cli evaluate f 0000100110001
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
