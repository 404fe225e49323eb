"""
Module execution entry point.

Allows running with: python -m bob_cli
"""

import sys
from bob_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
