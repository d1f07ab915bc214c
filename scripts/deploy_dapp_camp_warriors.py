#!/usr/bin/env python3
"""
Deploy DappCampWarriors.

Deployed on L2 (e.g. optimistic-kovan). When you run the script remember
--network optimistic-kovan
"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from dappcamp_warriors.cli import main


if __name__ == "__main__":
    sys.exit(main())
