"""Allow ``python -m osuexport``."""

import sys

from osuexport.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
