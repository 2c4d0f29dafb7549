# SPDX-License-Identifier: MIT
"""Base class for build file generation.

Generators take a parsed Invocation and write a build file for it
into an output directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from makegen.core.invocation import Invocation


class BaseGenerator:
    """Base class for generators with common functionality.

    Subclasses implement render(), which returns the build file contents,
    and generate(), which writes them and returns the written path.
    """

    def __init__(self, name: str) -> None:
        """Initialize a generator.

        Args:
            name: Generator name (e.g., 'make').
        """
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def render(self, invocation: Invocation) -> str:
        """Render build file contents. Subclasses must implement."""
        raise NotImplementedError

    def generate(self, invocation: Invocation, output_dir: Path) -> Path:
        """Generate build files. Subclasses must implement."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
