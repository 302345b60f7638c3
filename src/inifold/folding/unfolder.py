#!/usr/bin/env python3
"""
INIFOLD UNFOLDER
----------------
Rebuilds a logical value from its physical lines. Continuation lines
already carry their leading whitespace, so the lines are joined with no
separator.

Author: IniFold Team
Date: 2026-10-19
"""

import logging
from typing import List

logger = logging.getLogger("inifold.unfolder")


def value_unfold(raw_lines: List[bytes], raw_lengths: List[int]) -> bytes:
    """
    Concatenates the first raw_lengths[i] bytes of every raw_lines[i].
    An empty sequence yields b"".
    """
    oneline = bytearray()

    for part, length in zip(raw_lines, raw_lengths):
        logger.debug(f"Value: {part!r} Length: {length}")
        oneline += part[:length]

    return bytes(oneline)
