"""Allow ``python -m plays_mcp``."""

import sys

from plays_mcp.server import main

sys.exit(main())
