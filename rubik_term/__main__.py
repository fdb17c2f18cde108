# rubik_term/__main__.py
import sys

from rubik_term.cli import main

sys.exit(main())
