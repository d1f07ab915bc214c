#!/usr/bin/env python3
"""Validate that all known artifacts are compiled and deployable"""

import sys
from pathlib import Path

# Add parent directory to path so we can import the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from dappcamp_warriors.artifacts.loader import get_artifacts_dir, validate_artifacts


def validate():
    """Check every known contract, returning a process exit status"""
    print(f"Validating artifacts in {get_artifacts_dir()}...")

    status = validate_artifacts()
    print(f"\nFound {len(status)} known contracts:")

    for name, valid in status.items():
        if valid:
            print(f"  ✅ {name}")
        else:
            print(f"  ❌ {name}: missing or has no bytecode")

    print()
    if all(status.values()):
        print("✅ All contracts valid!")
        return 0
    else:
        print("❌ Some contracts failed validation")
        return 1


if __name__ == "__main__":
    sys.exit(validate())
