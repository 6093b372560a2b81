#!/usr/bin/env python3
"""Most Active Cookie - Entry point"""

import sys

from most_active_cookie.cli import main


if __name__ == "__main__":
    sys.exit(main())
