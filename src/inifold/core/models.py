#!/usr/bin/env python3
"""
INIFOLD CORE MODELS
-------------------
Defines the fundamental tags and format constants shared by every stage
of the value folding suite. These are the lowest level of the INI value
abstraction.

Author: IniFold Team
Date: 2026-10-19
"""

from enum import IntEnum


class ValueOrigin(IntEnum):
    """
    Where a value came from.

    READ values were parsed from a file and carry a source line number,
    CREATED values were built in memory and have line 0.
    """
    READ = 0
    CREATED = 1


# Separator written between the key and the first physical line
EQUAL_SIGN = b" = "

# Room reserved on the first line for EQUAL_SIGN
FOLDING_OVERHEAD = len(EQUAL_SIGN)

# Default column boundary for folded values
DEFAULT_BOUNDARY = 80

# Default line terminator used by the serializer
DEFAULT_TERMINATOR = b"\n"

# Bytes that qualify as folding opportunities (space, tab)
FOLD_WHITESPACE = (0x20, 0x09)
