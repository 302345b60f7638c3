import pytest

from inifold.core.errors import InvalidArgumentError
from inifold.folding.lines import add_to_arrays, create_arrays, destroy_arrays, to_bytes
from inifold.folding.unfolder import value_unfold


def test_unfold_concatenates_without_separators():
    lines = [b"bar", b" baz", b"\tqux"]
    assert value_unfold(lines, [3, 4, 4]) == b"bar baz\tqux"


def test_unfold_empty_sequence():
    assert value_unfold([], []) == b""


def test_unfold_honours_stored_lengths():
    """Only the first `length` bytes of each stored line count."""
    assert value_unfold([b"bar\x00", b" baz\x00\x00"], [3, 4]) == b"bar baz"


def test_arrays_stay_parallel():
    lines, lengths = create_arrays()
    add_to_arrays(b"bar", lines, lengths)
    add_to_arrays(" baz qux", lines, lengths)
    add_to_arrays(bytearray(b" tail-ignored"), lines, lengths, length=5)

    assert lines == [b"bar", b" baz qux", b" tail"]
    assert lengths == [3, 8, 5]

    destroy_arrays(lines, lengths)
    assert lines == [] and lengths == []


def test_destroy_arrays_accepts_missing_lists():
    destroy_arrays(None, None)


@pytest.mark.parametrize("value,length", [
    (None, None),
    (12345, None),
    (b"abc", 4),
    (b"abc", -1),
])
def test_to_bytes_rejects_bad_input(value, length):
    with pytest.raises(InvalidArgumentError):
        to_bytes(value, length)


def test_to_bytes_copies_and_encodes():
    source = bytearray(b"mutable")
    copy = to_bytes(source)
    source[0] = ord("M")

    assert copy == b"mutable"
    assert to_bytes("café") == "café".encode("utf-8")
    assert to_bytes(memoryview(b"abcdef"), 3) == b"abc"


def test_add_to_arrays_requires_lists():
    with pytest.raises(InvalidArgumentError):
        add_to_arrays(b"x", None, [])
