"""
Allow running dsmupsctl as a module: python -m dsm_ups.cli
"""

import sys
from .dsmupsctl import main

if __name__ == "__main__":
    sys.exit(main())
