# SPDX-License-Identifier: MIT
"""Configuration for makegen.

The argument grammar is positional and leaves no room for option flags,
so the few tunable settings are read from environment variables:

    MAKEGEN_MAKEFILE  - name of the generated file (default: Makefile)
    MAKEGEN_CC        - compiler used when -cc is not given (default: gcc)
    MAKEGEN_VERBOSE   - log progress at INFO level
    MAKEGEN_DEBUG     - log parsing details at DEBUG level
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

MAKEFILE_NAME = "Makefile"
DEFAULT_COMPILER = "gcc"


def _is_enabled(value: str | None) -> bool:
    """Interpret an environment flag; unset, empty and '0' are off."""
    return bool(value) and value != "0"


@dataclass(frozen=True)
class MakegenConfig:
    """Settings for a makegen run.

    Attributes:
        makefile_name: File name written in the output directory.
        default_compiler: Compiler used when no override is given.
        verbose: Enable INFO logging.
        debug: Enable DEBUG logging.
    """

    makefile_name: str = MAKEFILE_NAME
    default_compiler: str = DEFAULT_COMPILER
    verbose: bool = False
    debug: bool = False


def load_config(environ: Mapping[str, str] | None = None) -> MakegenConfig:
    """Build a MakegenConfig from environment variables.

    Args:
        environ: Mapping to read from (default: os.environ).

    Returns:
        The configuration, with defaults for anything not set.
    """
    if environ is None:
        environ = os.environ

    return MakegenConfig(
        makefile_name=environ.get("MAKEGEN_MAKEFILE") or MAKEFILE_NAME,
        default_compiler=environ.get("MAKEGEN_CC") or DEFAULT_COMPILER,
        verbose=_is_enabled(environ.get("MAKEGEN_VERBOSE")),
        debug=_is_enabled(environ.get("MAKEGEN_DEBUG")),
    )
