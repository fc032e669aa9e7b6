"""Allow ``python -m linecounter``."""

import sys

from linecounter.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
