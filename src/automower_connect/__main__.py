"""Run the automower_connect CLI."""

import sys

from .cli import main

sys.exit(main())
