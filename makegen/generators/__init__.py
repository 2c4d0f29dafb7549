# SPDX-License-Identifier: MIT
"""Build file generators for makegen."""

from makegen.generators.generator import BaseGenerator
from makegen.generators.make import MakefileGenerator

__all__ = [
    "BaseGenerator",
    "MakefileGenerator",
]
