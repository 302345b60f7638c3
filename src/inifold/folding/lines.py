#!/usr/bin/env python3
"""
INIFOLD LINE STORE
------------------
Helpers around the pair of parallel lists that hold a value's physical
lines and their lengths. A tokenizer builds a pair with create_arrays()
and add_to_arrays(), then hands it to ValueObject.from_lines().

The two lists always have the same number of entries.

Author: IniFold Team
Date: 2026-10-19
"""

from typing import List, Optional, Tuple, Union

from inifold.core.errors import InvalidArgumentError

BytesLike = Union[bytes, bytearray, memoryview, str]


def to_bytes(value: Optional[BytesLike], length: Optional[int] = None, what: str = "value") -> bytes:
    """
    Returns the first `length` bytes of value as an owned bytes copy.
    str input is encoded as UTF-8.
    """
    if value is None:
        raise InvalidArgumentError(f"Missing {what}")
    if isinstance(value, str):
        value = value.encode("utf-8")
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(f"{what} must be bytes-like, got {type(value).__name__}")

    data = bytes(value)
    if length is None:
        return data
    if length < 0 or length > len(data):
        raise InvalidArgumentError(f"Length {length} is out of range for a {what} of {len(data)} bytes")
    return data[:length]


def check_line(line: bytes, length: int, index: int = 0) -> None:
    """Rejects a stored line that is not bytes-like or a length outside it."""
    if not isinstance(line, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(f"Line {index} must be bytes-like, got {type(line).__name__}")
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidArgumentError(f"Length of line {index} must be an integer, got {length!r}")
    if length < 0 or length > len(line):
        raise InvalidArgumentError(f"Length {length} is out of range for line {index} of {len(line)} bytes")


def create_arrays() -> Tuple[List[bytes], List[int]]:
    """Creates an empty (raw_lines, raw_lengths) pair."""
    return [], []


def add_to_arrays(value: BytesLike, raw_lines: List[bytes], raw_lengths: List[int],
                  length: Optional[int] = None) -> None:
    """Appends one physical line and its length as matching entries."""
    if raw_lines is None or raw_lengths is None:
        raise InvalidArgumentError("Missing line arrays")

    line = to_bytes(value, length, what="line")
    raw_lines.append(line)
    raw_lengths.append(len(line))


def destroy_arrays(raw_lines: Optional[List[bytes]], raw_lengths: Optional[List[int]]) -> None:
    """Releases every stored line and length. Either list may be None."""
    if raw_lines is not None:
        raw_lines.clear()
    if raw_lengths is not None:
        raw_lengths.clear()
