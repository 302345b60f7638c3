#!/usr/bin/env python3
"""
INIFOLD FOLDER - Line Wrapping
------------------------------
Splits a logical value into physical lines that fit a column boundary,
the way long mail headers are folded.

Rules:
    - The first line shares its row with "key = ", so its budget is
      boundary - key_len - 3 (never below 0). Later lines get the whole
      boundary.
    - Spaces and tabs are the only break opportunities. The longest line
      that still fits wins; if the first opportunity is already past the
      budget the line breaks there and overflows.
    - A break leaves the whitespace at the start of the next line, and the
      next scan resumes on that same byte.
    - Every line after the first starts with whitespace: one space is
      synthesized when the chunk does not already begin with one.
    - A token with no whitespace is never split.

Author: IniFold Team
Date: 2026-10-19
"""

import logging
from typing import List

from inifold.core.models import FOLD_WHITESPACE, FOLDING_OVERHEAD

logger = logging.getLogger("inifold.folder")


def save_portion(raw_lines: List[bytes], raw_lengths: List[int], portion: bytes) -> None:
    """
    Stores one physical line. A continuation line that is not empty and
    does not start with a space or tab gets a leading space.
    """
    if portion and portion[0] not in FOLD_WHITESPACE and raw_lines:
        portion = b" " + portion

    raw_lines.append(portion)
    raw_lengths.append(len(portion))

    logger.debug(f"Added string: {portion!r} Added number: {len(portion)}")


def first_line_budget(key_len: int, fold_bound: int) -> int:
    if fold_bound > key_len + FOLDING_OVERHEAD:
        return fold_bound - key_len - FOLDING_OVERHEAD
    return 0


def value_fold(unfolded: bytes, key_len: int, fold_bound: int,
               raw_lines: List[bytes], raw_lengths: List[int]) -> None:
    """
    Rebuilds raw_lines/raw_lengths in place from the logical value.
    Previous contents of both lists are discarded.
    """
    del raw_lines[:]
    del raw_lengths[:]

    buf = bytes(unfolded)
    length = len(buf)

    # At least one column to fold into
    if fold_bound == 0:
        fold_bound = 1

    idx = 0             # Lines stored so far
    start_place = 0     # Start of the current line
    resume_place = 0    # Where the next scan begins
    done = False

    while not done:
        # 1. Budget for this line, as an absolute position in buf
        if idx == 0:
            best_place = first_line_budget(key_len, fold_bound)
        else:
            best_place = fold_bound

        logger.debug(f"Best place: {best_place}")

        zero_budget = idx == 0 and best_place == 0
        best_place += start_place
        fold_place = start_place
        next_place = start_place

        # 2. Scan for the next folding opportunity
        for i in range(resume_place, length + 1):
            if i == length:
                next_place = i
                done = True
                break

            if buf[i] in FOLD_WHITESPACE or (zero_budget and i == 0):
                next_place = i
            else:
                continue

            if next_place > best_place or (zero_budget and next_place == 0):
                if fold_place == start_place and next_place != 0:
                    # The first opportunity is already past the budget
                    fold_len = next_place - start_place
                else:
                    # Fall back to the last opportunity that fits
                    fold_len = fold_place - start_place

                logger.debug(f"Fold len: {fold_len}")

                save_portion(raw_lines, raw_lengths, buf[start_place:start_place + fold_len])
                start_place += fold_len
                # The breaking whitespace is scanned again by the next line
                resume_place = next_place
                idx += 1
                break

            fold_place = next_place

        # 3. Flush the tail once the end of the buffer is reached
        if done:
            if next_place > best_place and fold_place != start_place:
                save_portion(raw_lines, raw_lengths, buf[start_place:fold_place])
                start_place = fold_place
                idx += 1

            save_portion(raw_lines, raw_lengths, buf[start_place:length])
            idx += 1

    logger.debug(f"Folded {length} bytes into {idx} lines")
