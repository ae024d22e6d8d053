"""Module entry point for running with python -m akafoe_menu."""

import sys

from akafoe_menu.cli import main

if __name__ == "__main__":
    sys.exit(main())
