#!/usr/bin/env python3
"""
INIFOLD COMMENT BLOCK
---------------------
The block of comment lines that sits above a key. A value owns at most
one block; ownership moves with ValueObject.extract_comment() and
ValueObject.put_comment().

Author: IniFold Team
Date: 2026-10-19
"""

from typing import Iterable, List, Optional

from inifold.core.errors import InvalidArgumentError
from inifold.folding.lines import BytesLike, to_bytes


class IniComment:
    """
    Ordered comment lines, stored without line terminators.
    """

    def __init__(self, lines: Optional[Iterable[BytesLike]] = None):
        self._lines: List[bytes] = []
        self.destroyed = False
        for line in lines or ():
            self.add_line(line)

    def _check_alive(self):
        if self.destroyed:
            raise InvalidArgumentError("Comment has been destroyed")

    def add_line(self, line: BytesLike):
        self._check_alive()
        self._lines.append(to_bytes(line, what="comment line"))

    @property
    def num_lines(self) -> int:
        self._check_alive()
        return len(self._lines)

    def get_line(self, index: int) -> bytes:
        """Returns the comment line at index."""
        self._check_alive()
        if index < 0 or index >= len(self._lines):
            raise InvalidArgumentError(f"Comment line {index} out of range (have {len(self._lines)})")
        return self._lines[index]

    def destroy(self):
        """Releases the lines. The block is unusable afterwards."""
        self._lines.clear()
        self.destroyed = True

    def __repr__(self):
        return f"IniComment(lines={self._lines!r}, destroyed={self.destroyed})"
