#!/usr/bin/env python3
"""
mathcli Entry Point

Run without installing the package:
    printf '5\n4\n' | python run_mathcli.py add

Once installed, the same CLI is available as:
    mathcli add
    python -m mathcli add
"""

import sys
import os

# Add the package directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from mathcli.cli import main


if __name__ == "__main__":
    main()
