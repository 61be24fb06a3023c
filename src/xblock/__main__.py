"""Allow ``python -m xblock``."""
import sys

from xblock.cli._dispatcher import main

if __name__ == "__main__":
    sys.exit(main())
