import pytest

from muffet.config import Color, is_color_enabled


@pytest.mark.parametrize(
    "color, terminal, expected",
    [
        (Color.AUTO, True, True),
        (Color.AUTO, False, False),
        (Color.ALWAYS, True, True),
        (Color.ALWAYS, False, True),
        (Color.NEVER, True, False),
        (Color.NEVER, False, False),
    ],
)
def test_is_color_enabled(color, terminal, expected):
    assert is_color_enabled(color, terminal) is expected


def test_color_from_string():
    assert Color("always") is Color.ALWAYS
    assert is_color_enabled(Color("auto"), True) is True