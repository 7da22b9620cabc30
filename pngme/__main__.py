#!/usr/bin/env python3
"""Entry point for running pngme as a module.

This allows the package to be invoked with:
    python -m pngme [arguments]
"""

import sys

from pngme.cli import main

if __name__ == "__main__":
    sys.exit(main())
