"""Entry point for ``python -m batchtag``."""

import sys

from batchtag.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
