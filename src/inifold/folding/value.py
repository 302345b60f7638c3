#!/usr/bin/env python3
"""
INIFOLD VALUE OBJECT
--------------------
The value of one INI key. It keeps two views of the same data in sync:

    raw_lines / raw_lengths   the physical lines as they sit on disk
    concatenated              the logical value with the folding removed

A value read from a file starts from its physical lines and is unfolded
once. A value built in memory starts from the logical bytes and is folded
once. update() and set_key_length() re-fold in place; if that fails the
object must be discarded.

Author: IniFold Team
Date: 2026-10-19
"""

import logging
from typing import List, Optional, Tuple

from inifold.core.errors import InvalidArgumentError
from inifold.core.models import DEFAULT_BOUNDARY, DEFAULT_TERMINATOR, ValueOrigin
from inifold.folding.comment import IniComment
from inifold.folding.folder import value_fold
from inifold.folding.lines import BytesLike, check_line, create_arrays, destroy_arrays, to_bytes
from inifold.folding.serializer import value_serialize
from inifold.folding.unfolder import value_unfold

logger = logging.getLogger("inifold.value")


def _check_sizes(key_len: int, boundary: int):
    if key_len is None or key_len < 0:
        raise InvalidArgumentError(f"Invalid key length: {key_len!r}")
    if boundary is None or boundary < 0:
        raise InvalidArgumentError(f"Invalid boundary: {boundary!r}")


class ValueObject:
    """
    One key's value with its physical layout and optional comment block.
    Use from_lines() or from_string() to build one.
    """

    def __init__(self, raw_lines: List[bytes], raw_lengths: List[int], unfolded: bytes,
                 origin: ValueOrigin, line: int, key_len: int, boundary: int,
                 comment: Optional[IniComment] = None):
        self._raw_lines = raw_lines
        self._raw_lengths = raw_lengths
        self._unfolded = unfolded
        self.origin = origin
        self.line = line
        self.key_len = key_len
        self.boundary = boundary
        self.comment = comment

    @classmethod
    def from_lines(cls, raw_lines: List[bytes], raw_lengths: List[int], line: int,
                   origin: ValueOrigin = ValueOrigin.READ, key_len: int = 0,
                   boundary: int = DEFAULT_BOUNDARY,
                   comment: Optional[IniComment] = None) -> "ValueObject":
        """
        Wraps physical lines collected by a parser. The lists are kept by
        reference, not copied, and the logical value is unfolded from them.
        """
        _check_sizes(key_len, boundary)
        if raw_lines is None or raw_lengths is None:
            logger.error("Invalid argument: missing line arrays")
            raise InvalidArgumentError("Missing line arrays")
        if len(raw_lines) != len(raw_lengths):
            logger.error(f"Invalid argument: {len(raw_lines)} lines but {len(raw_lengths)} lengths")
            raise InvalidArgumentError("raw_lines and raw_lengths must have the same number of entries")
        for i, (part, length) in enumerate(zip(raw_lines, raw_lengths)):
            try:
                check_line(part, length, i)
            except InvalidArgumentError as e:
                logger.error(f"Invalid argument: {str(e)}")
                raise

        unfolded = value_unfold(raw_lines, raw_lengths)
        logger.debug(f"Unfolded: {unfolded!r}")

        return cls(raw_lines, raw_lengths, unfolded, origin, line, key_len, boundary, comment)

    @classmethod
    def from_string(cls, value: BytesLike, length: Optional[int] = None,
                    origin: ValueOrigin = ValueOrigin.CREATED, key_len: int = 0,
                    boundary: int = DEFAULT_BOUNDARY,
                    comment: Optional[IniComment] = None) -> "ValueObject":
        """
        Builds a value from its logical bytes and folds it. The line number
        is unknown for such values and set to 0.
        """
        _check_sizes(key_len, boundary)
        unfolded = to_bytes(value, length)
        raw_lines, raw_lengths = create_arrays()

        vo = cls(raw_lines, raw_lengths, unfolded, origin, 0, key_len, boundary, comment)
        vo._fold()
        return vo

    def _fold(self):
        value_fold(self._unfolded, self.key_len, self.boundary,
                   self._raw_lines, self._raw_lengths)

    # --- Accessors ---

    @property
    def concatenated(self) -> bytes:
        """The logical value with no line breaks."""
        return self._unfolded

    @property
    def raw_lines(self) -> Tuple[bytes, ...]:
        return tuple(self._raw_lines)

    @property
    def raw_lengths(self) -> Tuple[int, ...]:
        return tuple(self._raw_lengths)

    # --- Mutators ---

    def update(self, value: BytesLike, length: Optional[int] = None,
               origin: ValueOrigin = ValueOrigin.CREATED,
               boundary: Optional[int] = None):
        """
        Replaces the logical value and re-folds it into the existing line
        lists. boundary defaults to the current one.
        """
        if boundary is not None:
            _check_sizes(self.key_len, boundary)
        unfolded = to_bytes(value, length)

        self._unfolded = unfolded
        self.origin = origin
        if boundary is not None:
            self.boundary = boundary

        self._fold()

    def set_key_length(self, key_len: int):
        """Changes the key length and re-folds with the new first-line budget."""
        _check_sizes(key_len, self.boundary)

        self.key_len = key_len
        self._fold()

    def extract_comment(self) -> Optional[IniComment]:
        """Hands the comment block to the caller and forgets it."""
        comment = self.comment
        self.comment = None
        return comment

    def put_comment(self, comment: IniComment):
        """
        Takes ownership of comment. A different block held before is
        destroyed first.
        """
        if comment is None:
            logger.error("Invalid argument: missing comment")
            raise InvalidArgumentError("Missing comment")

        if self.comment is not None and self.comment is not comment:
            self.comment.destroy()

        self.comment = comment

    def destroy(self):
        """Releases the lines, the logical value and any owned comment."""
        destroy_arrays(self._raw_lines, self._raw_lengths)
        self._unfolded = b""
        if self.comment is not None:
            self.comment.destroy()
            self.comment = None

    # --- Output ---

    def serialize(self, key: BytesLike, terminator: BytesLike = DEFAULT_TERMINATOR) -> bytes:
        """Renders comment, key, separator and physical lines."""
        return value_serialize(self, key, terminator=terminator)

    def __repr__(self):
        return (f"ValueObject(value={self._unfolded!r}, lines={len(self._raw_lines)}, "
                f"origin={self.origin.name if isinstance(self.origin, ValueOrigin) else self.origin}, "
                f"line={self.line}, key_len={self.key_len}, boundary={self.boundary})")
