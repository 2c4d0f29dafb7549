# SPDX-License-Identifier: MIT
"""Command-line interface for makegen."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from makegen.configure.config import MakegenConfig, load_config
from makegen.core.errors import (
    ArtifactAlreadyExists,
    ArtifactCreateFailure,
    MalformedInvocation,
    UsageRequested,
)
from makegen.core.invocation import parse_invocation
from makegen.generators.make import MakefileGenerator

# Set up logging
logger = logging.getLogger("makegen")

USAGE = """\
Usage:
makegen {executableName} -f {CFLAGS} -s {SOURCE FILES} [-cc {desired compiler}]
Fields in brackets are optional."""


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(name)s: %(message)s"
    elif verbose:
        level = logging.INFO
        fmt = "%(levelname)s: %(message)s"
    else:
        level = logging.WARNING
        fmt = "%(levelname)s: %(message)s"

    logging.basicConfig(level=level, format=fmt)


def print_usage() -> None:
    """Print a correct usage message to stdout."""
    print(USAGE)


def alert_success() -> None:
    print("Successfully created makefile.")


def run(
    argv: Sequence[str],
    config: MakegenConfig,
    output_dir: Path | None = None,
) -> int:
    """Parse argv and write the makefile.

    Args:
        argv: Full argument list, program name at position 0.
        config: Settings for this run.
        output_dir: Directory to write into (default: current dir).

    Returns:
        Process exit code.
    """
    if output_dir is None:
        output_dir = Path.cwd()

    try:
        invocation = parse_invocation(argv)
    except UsageRequested as e:
        logger.debug("Showing usage: %s", e)
        print_usage()
        return e.exit_code
    except MalformedInvocation as e:
        print("Invalid invocation.")
        print(f"Error: {e.detail}")
        print_usage()
        return e.exit_code

    generator = MakefileGenerator(
        makefile_name=config.makefile_name,
        default_compiler=config.default_compiler,
    )

    try:
        generator.generate(invocation, output_dir)
    except ArtifactAlreadyExists as e:
        print("Unable to create makefile:")
        print(f"{config.makefile_name} already exists in this directory.")
        return e.exit_code
    except ArtifactCreateFailure as e:
        logger.debug("Open failed: %s", e)
        print("FATAL ERROR:")
        print("Unable to create makefile:")
        print(f"{config.makefile_name} could not be created.")
        return e.exit_code

    alert_success()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the makegen CLI."""
    if argv is None:
        argv = sys.argv

    config = load_config()
    setup_logging(config.verbose, config.debug)

    if len(argv) == 2 and argv[1] == "--version":
        from makegen import __version__

        print(f"makegen {__version__}")
        return 0

    return run(argv, config)


if __name__ == "__main__":
    sys.exit(main())
