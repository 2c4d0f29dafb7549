# SPDX-License-Identifier: MIT
"""Makefile generator.

Writes a Makefile with compiler and flag variables and two rules:
"all", which compiles every source file into one executable, and
"clean", which removes that executable.

Example output for ``makegen prog -f -Wall -s a.c b.c``::

    # Automatically generated makefile
    # Generated using makegen

    CC=gcc
    CFLAGS=-Wall 
    TARGETS=a.c b.c 


    all:
    	$(CC) $(CFLAGS) -o prog $(TARGETS)

    clean:
    	rm -f prog

    # End automatically generated makefile

Each flag and source is followed by a single space, so non-empty
variable lines end in a trailing space.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from makegen.configure.config import DEFAULT_COMPILER, MAKEFILE_NAME
from makegen.core.errors import ArtifactAlreadyExists, ArtifactCreateFailure
from makegen.generators.generator import BaseGenerator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from makegen.core.invocation import Invocation

logger = logging.getLogger(__name__)

HEADER = "# Automatically generated makefile\n# Generated using makegen\n\n"
FOOTER = "# End automatically generated makefile\n"


def _space_terminated(tokens: Iterable[str]) -> str:
    return "".join(f"{token} " for token in tokens)


class MakefileGenerator(BaseGenerator):
    """Generator for a two-rule Makefile.

    The generator refuses to overwrite an existing file: generate() checks
    for it first and opens the file in exclusive-create mode.

    Example:
        generator = MakefileGenerator()
        invocation = parse_invocation(sys.argv)
        generator.generate(invocation, Path.cwd())
        # Creates ./Makefile
    """

    def __init__(
        self,
        makefile_name: str = MAKEFILE_NAME,
        default_compiler: str = DEFAULT_COMPILER,
    ) -> None:
        super().__init__("make")
        self.makefile_name = makefile_name
        self.default_compiler = default_compiler

    def output_path(self, output_dir: Path) -> Path:
        return output_dir / self.makefile_name

    def artifact_exists(self, output_dir: Path) -> bool:
        """Check whether the makefile is already present in output_dir."""
        return self.output_path(output_dir).exists()

    def render(self, invocation: Invocation) -> str:
        """Render the makefile contents for an invocation."""
        return "".join(
            [
                HEADER,
                self._render_variables(invocation),
                "\n\n",
                self._render_rules(invocation.executable_name),
                FOOTER,
            ]
        )

    def _render_variables(self, invocation: Invocation) -> str:
        compiler = invocation.resolved_compiler(self.default_compiler)
        return (
            f"CC={compiler}\n"
            f"CFLAGS={_space_terminated(invocation.compiler_flags)}\n"
            f"TARGETS={_space_terminated(invocation.source_files)}\n"
        )

    def _render_rules(self, executable_name: str) -> str:
        return (
            "all:\n"
            f"\t$(CC) $(CFLAGS) -o {executable_name} $(TARGETS)\n"
            "\n"
            "clean:\n"
            f"\trm -f {executable_name}\n"
            "\n"
        )

    def generate(self, invocation: Invocation, output_dir: Path) -> Path:
        """Write the makefile for an invocation.

        Args:
            invocation: The parsed command line.
            output_dir: Directory to write the makefile to.

        Returns:
            Path of the written makefile.

        Raises:
            ArtifactAlreadyExists: The makefile is already present.
            ArtifactCreateFailure: The makefile could not be written.
        """
        output_file = self.output_path(output_dir)

        if self.artifact_exists(output_dir):
            raise ArtifactAlreadyExists(str(output_file))

        # Arguments may carry undecodable bytes as surrogate escapes;
        # write them back out as the original bytes.
        try:
            data = os.fsencode(self.render(invocation))
        except UnicodeEncodeError as e:
            raise ArtifactCreateFailure(str(output_file), str(e)) from e

        try:
            f = open(output_file, "xb")
        except FileExistsError:
            raise ArtifactAlreadyExists(str(output_file)) from None
        except OSError as e:
            raise ArtifactCreateFailure(str(output_file), e.strerror) from e

        try:
            with f:
                f.write(data)
        except OSError as e:
            output_file.unlink(missing_ok=True)
            raise ArtifactCreateFailure(str(output_file), e.strerror) from e

        logger.info("Wrote %s", output_file)
        return output_file
