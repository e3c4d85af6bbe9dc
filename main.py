"""Main entry point for the vanilla-record command."""

import sys

from vanilla.cli import main

if __name__ == "__main__":
    sys.exit(main())
