#!/usr/bin/env python3
"""
Vulnerable-class verifier.

Reads the component dataset, checks each vulnerable class inside the
component's Maven artifact and falls back to Maven Central search.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from jclec.cli import main


if __name__ == "__main__":
    main()
