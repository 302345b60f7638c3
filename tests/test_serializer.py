import pytest

from inifold.core.errors import InvalidArgumentError
from inifold.folding.comment import IniComment
from inifold.folding.lines import add_to_arrays, create_arrays
from inifold.folding.serializer import value_serialize
from inifold.folding.value import ValueObject


def test_folded_value_layout():
    vo = ValueObject.from_string(b"bar baz qux", key_len=3, boundary=10)
    assert vo.serialize(b"foo") == b"foo = bar\n baz qux\n"


def test_comment_lines_come_first():
    comment = IniComment([b"# one", b"# two"])
    vo = ValueObject.from_string(b"v", key_len=1, boundary=80, comment=comment)

    assert vo.serialize(b"k") == b"# one\n# two\nk = v\n"


def test_empty_value_still_ends_with_terminator():
    vo = ValueObject.from_string(b"", key_len=1)
    assert vo.serialize(b"k") == b"k = \n"


def test_only_key_length_bytes_of_key():
    vo = ValueObject.from_string(b"v", key_len=3)
    assert vo.serialize(b"foobar") == b"foo = v\n"


def test_key_shorter_than_key_length():
    vo = ValueObject.from_string(b"v", key_len=5)
    with pytest.raises(InvalidArgumentError):
        vo.serialize(b"foo")


def test_custom_terminator():
    comment = IniComment([b"; windows"])
    vo = ValueObject.from_string(b"bar baz qux", key_len=3, boundary=10, comment=comment)

    assert vo.serialize("foo", terminator=b"\r\n") == b"; windows\r\nfoo = bar\r\n baz qux\r\n"


def test_parsed_value_round_trips_byte_exact():
    """Physical lines read from disk come back out unchanged."""
    lines, lengths = create_arrays()
    for part in (b"bar", b"   baz", b"\tqux"):
        add_to_arrays(part, lines, lengths)
    vo = ValueObject.from_lines(lines, lengths, 3, key_len=3, boundary=10)

    assert vo.serialize(b"foo") == b"foo = bar\n   baz\n\tqux\n"


def test_refold_after_key_length_change():
    vo = ValueObject.from_string(b"bar baz qux", key_len=3, boundary=10)
    vo.set_key_length(8)

    assert vo.serialize(b"longkeyx") == b"longkeyx = \n bar baz\n qux\n"


def test_serialize_requires_value_object():
    with pytest.raises(InvalidArgumentError):
        value_serialize(None, b"k")


def test_serialize_after_extracting_comment():
    vo = ValueObject.from_string(b"v", key_len=1, comment=IniComment([b"# gone"]))
    vo.extract_comment()

    assert vo.serialize(b"k") == b"k = v\n"
