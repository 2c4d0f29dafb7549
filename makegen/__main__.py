# SPDX-License-Identifier: MIT
"""Allow running makegen as ``python -m makegen``."""

import sys

from makegen.cli import main

sys.exit(main())
