#!/usr/bin/env python
"""
Compute a Hasse diagram and print it as JSON.

Same interface as the ``hasse-diagram`` console command, e.g.:

    python scripts/generate_diagram.py divisibility --numbers "1, 2, 3, 4, 6, 12"
"""

from __future__ import annotations

import sys

from hasse_diagram.cli import main


if __name__ == "__main__":
    sys.exit(main())
