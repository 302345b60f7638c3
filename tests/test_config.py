import pytest

from inifold.core.config import FoldSettings, load_settings, settings_from_dict
from inifold.core.errors import InvalidArgumentError
from inifold.core.models import DEFAULT_BOUNDARY, ValueOrigin


def test_defaults():
    settings = FoldSettings()

    assert settings.boundary == DEFAULT_BOUNDARY == 80
    assert settings.line_terminator == "\n"
    assert settings.terminator_bytes == b"\n"
    assert settings.origin is ValueOrigin.CREATED


def test_load_settings_file(tmp_path):
    path = tmp_path / "inifold.yaml"
    path.write_text('boundary: 72\nline_terminator: "\\r\\n"\norigin: read\n')

    settings = load_settings(path)

    assert settings.boundary == 72
    assert settings.terminator_bytes == b"\r\n"
    assert settings.origin is ValueOrigin.READ


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_settings(str(path)) == FoldSettings()


def test_missing_file(tmp_path):
    with pytest.raises(InvalidArgumentError):
        load_settings(tmp_path / "nope.yaml")


def test_unparseable_file(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("boundary: [1, 2\n")

    with pytest.raises(InvalidArgumentError):
        load_settings(path)


def test_file_must_hold_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(InvalidArgumentError):
        load_settings(path)


@pytest.mark.parametrize("data", [
    {"boundary": -1},
    {"boundary": "wide"},
    {"boundary": True},
    {"line_terminator": ""},
    {"origin": "somewhere"},
    {"width": 10},
])
def test_rejected_settings(data):
    with pytest.raises(InvalidArgumentError):
        settings_from_dict(data)


def test_zero_boundary_is_allowed():
    assert settings_from_dict({"boundary": 0}).boundary == 0
