"""Entry point for running sqldiff as a module (python -m sqldiff)."""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
