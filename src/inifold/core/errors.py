#!/usr/bin/env python3
"""
INIFOLD ERRORS
--------------
Exception hierarchy raised by the value folding suite.

Allocation failures are not wrapped: Python's own MemoryError surfaces
unchanged to the caller.

Author: IniFold Team
Date: 2026-10-19
"""


class IniValueError(Exception):
    """Base class for every error raised by inifold."""


class InvalidArgumentError(IniValueError, ValueError):
    """A required argument is missing or malformed."""
