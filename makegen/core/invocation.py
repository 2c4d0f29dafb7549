# SPDX-License-Identifier: MIT
"""Command-line grammar for makegen.

An invocation has a fixed shape:

    makegen <executableName> -f [<cflag> ...] -s [<sourceFile> ...] [-cc <compiler>]

The flags marker must sit at position 2. The remaining markers are located
in a single forward pass that records the first occurrence of each one.
Markers are matched as whole tokens, so a source file named "-sfoo.c" or a
flag such as "-ccache" is never mistaken for a marker.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from makegen.core.errors import MalformedInvocation, UsageRequested

logger = logging.getLogger(__name__)

FLAGS_MARKER = "-f"
SOURCES_MARKER = "-s"
COMPILER_MARKER = "-cc"

# Program name, executable name, flags marker and sources marker.
MIN_ARGS = 4
FLAGS_MARKER_POSITION = 2


@dataclass(frozen=True)
class MarkerPositions:
    """Argument positions of the sources and compiler markers.

    Attributes:
        sources: Index of the first sources marker, or None.
        compiler: Index of the first compiler marker after the sources
            marker, or None.
    """

    sources: int | None = None
    compiler: int | None = None


@dataclass(frozen=True)
class Invocation:
    """Parsed command line.

    Attributes:
        executable_name: Name of the program the makefile builds.
        compiler: Compiler given with -cc, or None to use the default.
        compiler_flags: Tokens between -f and -s, in order.
        source_files: Tokens after -s up to -cc or the end, in order.
    """

    executable_name: str
    compiler: str | None = None
    compiler_flags: tuple[str, ...] = ()
    source_files: tuple[str, ...] = ()

    def resolved_compiler(self, default: str) -> str:
        """Return the override compiler, or default if there is none."""
        return self.compiler if self.compiler is not None else default


def find_markers(argv: Sequence[str], start: int = 0) -> MarkerPositions:
    """Locate the sources and compiler markers.

    The compiler marker is only recognized after the sources marker has been
    seen. Later occurrences of either marker are left as ordinary tokens.

    Args:
        argv: Argument list.
        start: First index to examine.

    Returns:
        The marker positions found.
    """
    sources: int | None = None
    compiler: int | None = None

    for i in range(start, len(argv)):
        token = argv[i]
        if sources is None:
            if token == SOURCES_MARKER:
                sources = i
        elif token == COMPILER_MARKER:
            compiler = i
            break

    return MarkerPositions(sources=sources, compiler=compiler)


def validate_invocation(argv: Sequence[str]) -> None:
    """Check the fixed-position parts of the argument list.

    Raises:
        UsageRequested: Fewer than MIN_ARGS arguments.
        MalformedInvocation: The flags marker is missing from position 2,
            or the executable name is empty.
    """
    if len(argv) < MIN_ARGS:
        raise UsageRequested(len(argv))

    if argv[FLAGS_MARKER_POSITION] != FLAGS_MARKER:
        raise MalformedInvocation("No flags found.")

    if not argv[1]:
        raise MalformedInvocation("Executable name is empty.")


def parse_invocation(argv: Sequence[str]) -> Invocation:
    """Turn a raw argument list into an Invocation.

    Args:
        argv: Full argument list, program name at position 0.

    Returns:
        The parsed invocation.

    Raises:
        UsageRequested: Too few arguments to form an invocation.
        MalformedInvocation: The arguments do not follow the grammar.
    """
    validate_invocation(argv)

    markers = find_markers(argv, FLAGS_MARKER_POSITION + 1)
    if markers.sources is None:
        raise MalformedInvocation(f'No source files flag "{SOURCES_MARKER}" found.')

    compiler: str | None = None
    sources_end = len(argv)
    if markers.compiler is not None:
        sources_end = markers.compiler
        if markers.compiler + 1 < len(argv):
            compiler = argv[markers.compiler + 1]
            extra = argv[markers.compiler + 2 :]
            if extra:
                logger.debug("Ignoring arguments after compiler: %s", " ".join(extra))
        else:
            logger.warning(
                "%s given without a compiler name; using the default",
                COMPILER_MARKER,
            )

    invocation = Invocation(
        executable_name=argv[1],
        compiler=compiler,
        compiler_flags=tuple(argv[FLAGS_MARKER_POSITION + 1 : markers.sources]),
        source_files=tuple(argv[markers.sources + 1 : sources_end]),
    )
    logger.debug("Parsed %r", invocation)
    return invocation
