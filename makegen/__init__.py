# SPDX-License-Identifier: MIT
"""
makegen: generate a two-rule Makefile from the command line.

    makegen myProgram -f -Wall -g -O0 -s file1.c file2.c file3.c

writes a Makefile whose "all" rule compiles the source files into
myProgram and whose "clean" rule removes it.
"""

from __future__ import annotations

__version__ = "0.1.0"

from makegen.configure.config import MakegenConfig, load_config  # noqa: E402
from makegen.core.invocation import Invocation, parse_invocation  # noqa: E402
from makegen.generators.make import MakefileGenerator  # noqa: E402

# Public API exports
__all__ = [
    # Version
    "__version__",
    # Configuration
    "MakegenConfig",
    "load_config",
    # Argument parsing
    "Invocation",
    "parse_invocation",
    # Generators
    "MakefileGenerator",
]
