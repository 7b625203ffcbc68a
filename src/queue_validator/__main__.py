"""Entry point for ``python -m src.queue_validator``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
