# main.py
from __future__ import annotations

import sys

from rubik_term.cli import main

if __name__ == "__main__":
    sys.exit(main())
