"""Run the solution finder MCP server from a source checkout."""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path to support direct execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from solutionFinder.main import main


if __name__ == "__main__":
    main()
