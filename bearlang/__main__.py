"""
Entry point for running bearlang as a module.

Usage:
    python -m bearlang parse input.bl
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
