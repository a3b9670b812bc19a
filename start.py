"""Simple launcher for the city route finder.

Runs the interactive command line front-end on the bundled city matrix,
or on the CSV file given as first argument.
"""

from __future__ import annotations

import sys

from cityroute.cli import main

if __name__ == "__main__":
    sys.exit(main())
