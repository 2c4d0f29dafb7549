# SPDX-License-Identifier: MIT
"""Core makegen types: the parsed invocation and errors."""
