#!/usr/bin/env python3

"""
scripts/verify_contributions.py

Verifies every contribution folder under ./contributions against the
initial setup (0000_initial) and prints a PASS/FAIL summary table.

Typical usage:
    python scripts/verify_contributions.py
    python scripts/verify_contributions.py --no-sync --fail-on-error

Requires:
    - snarkjs installed and on PATH
    - aws CLI with AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY set, unless --no-sync
"""

import os
import sys

# Add the parent directory to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from trusted_setup.verify import main

if __name__ == "__main__":
    sys.exit(main())
