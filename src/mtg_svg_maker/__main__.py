"""Main entry point for the MTG SVG card maker."""

import sys

from mtg_svg_maker.cli import main

if __name__ == "__main__":
    sys.exit(main())
