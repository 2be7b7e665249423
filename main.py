#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

Grow from three preset seeds on a full-HD canvas:

    python main.py preset 3

Or from the non-black pixels of a seed image:

    python main.py image seeds.png
    python -m all_colors.cli preset --help
"""

from all_colors.cli import app

if __name__ == "__main__":
    app()
