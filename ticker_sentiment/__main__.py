"""Entry point for running ticker_sentiment as a module: python -m ticker_sentiment"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
