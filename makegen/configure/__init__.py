# SPDX-License-Identifier: MIT
"""Runtime configuration for makegen."""
