# SPDX-License-Identifier: MIT
"""Custom exceptions for makegen.

All makegen exceptions inherit from MakegenError, which carries the
process exit code the CLI should use when the error reaches it.
"""

from __future__ import annotations


class MakegenError(Exception):
    """Base class for all makegen exceptions.

    Attributes:
        message: The error message.
        exit_code: Exit code the CLI reports for this error.
    """

    exit_code: int = 1

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UsageRequested(MakegenError):
    """Too few arguments were given.

    This is a help request rather than a failure, so it exits with 0.
    """

    exit_code = 0

    def __init__(self, argc: int) -> None:
        self.argc = argc
        super().__init__(f"too few arguments ({argc})")


class MalformedInvocation(MakegenError):
    """The argument list does not follow the makegen grammar.

    Attributes:
        detail: Human-readable description of what is wrong.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)


class GenerateError(MakegenError):
    """Error while writing the makefile.

    Attributes:
        path: The makefile path that could not be written.
    """

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)


class ArtifactAlreadyExists(GenerateError):
    """The makefile is already present and will not be overwritten."""

    def __init__(self, path: str) -> None:
        super().__init__(f"makefile already exists: {path}", path)


class ArtifactCreateFailure(GenerateError):
    """The makefile could not be opened for writing.

    Attributes:
        reason: The underlying OS error message, if any.
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.reason = reason
        message = f"makefile could not be created: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, path)
