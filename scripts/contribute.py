#!/usr/bin/env python3

"""
scripts/contribute.py

Adds a contribution on top of the latest folder under ./contributions
and uploads it to the ceremony bucket.

Typical usage:
    python scripts/contribute.py --name alice
"""

import os
import sys

# Add the parent directory to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from trusted_setup.contribute import main

if __name__ == "__main__":
    sys.exit(main())
