#!/usr/bin/env python3
"""
INIFOLD SERIALIZER - Byte-Exact Output
--------------------------------------
Renders a value back to the layout it has on disk:

    [comment line TERM]* key " = " [value line TERM]+

Every physical line, the last one included, ends with the terminator.

Author: IniFold Team
Date: 2026-10-19
"""

import logging
from typing import TYPE_CHECKING

from inifold.core.errors import InvalidArgumentError
from inifold.core.models import DEFAULT_TERMINATOR, EQUAL_SIGN
from inifold.folding.lines import BytesLike, to_bytes

if TYPE_CHECKING:
    from inifold.folding.value import ValueObject

logger = logging.getLogger("inifold.serializer")


def value_serialize(vo: "ValueObject", key: BytesLike,
                    terminator: BytesLike = DEFAULT_TERMINATOR) -> bytes:
    """
    Serializes vo under key. Exactly vo.key_len bytes of key are written.
    """
    if vo is None:
        logger.error("Invalid argument: missing value object")
        raise InvalidArgumentError("Missing value object")

    key_bytes = to_bytes(key, what="key")
    if len(key_bytes) < vo.key_len:
        logger.error(f"Key {key_bytes!r} is shorter than key length {vo.key_len}")
        raise InvalidArgumentError(f"Key is {len(key_bytes)} bytes, key length is {vo.key_len}")

    term = to_bytes(terminator, what="line terminator")

    output = bytearray()

    # 1. Comment block
    if vo.comment is not None:
        for i in range(vo.comment.num_lines):
            output += vo.comment.get_line(i)
            output += term

    # 2. Key and separator
    output += key_bytes[:vo.key_len]
    output += EQUAL_SIGN

    # 3. Physical lines
    for part, length in zip(vo.raw_lines, vo.raw_lengths):
        logger.debug(f"Value: {part!r} Length: {length}")
        output += part[:length]
        output += term

    logger.debug(f"Buffer: {bytes(output)!r}")
    return bytes(output)
