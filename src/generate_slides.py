#!/usr/bin/env python3
"""
Script to render a slide document into a themed HTML deck.
This is a thin wrapper around the slide_engine package.
"""

import sys
from slide_engine.cli import main

if __name__ == '__main__':
    sys.exit(main())
