from __future__ import annotations

import sys

from envelope_parser.cli import main

if __name__ == "__main__":
    sys.exit(main())
