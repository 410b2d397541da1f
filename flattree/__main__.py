# flattree/__main__.py

"""Run the command-line interface with ``python -m flattree``."""

import sys

from flattree.cli import main

sys.exit(main())
