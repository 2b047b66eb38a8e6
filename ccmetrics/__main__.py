"""
Entry point for running ccmetrics as a module.

Usage:
    python -m ccmetrics complexity main.c
    python -m ccmetrics --help
"""

import sys
from ccmetrics.cli import main

if __name__ == "__main__":
    sys.exit(main())
