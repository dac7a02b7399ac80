import pytest

from cubraycaster.constants import Key


@pytest.mark.parametrize(
    "code, key",
    [
        (65307, Key.ESC),
        (119, Key.W),
        (97, Key.A),
        (115, Key.S),
        (100, Key.D),
        (101, Key.E),
        (65361, Key.LEFT),
        (65363, Key.RIGHT),
    ],
)
def test_from_code_known(code, key):
    assert Key.from_code(code) is key


@pytest.mark.parametrize("code", [0, -1, 113, 65362, 65364])
def test_from_code_unknown(code):
    assert Key.from_code(code) is None


def test_from_code_round_trip():
    for key in Key:
        assert Key.from_code(int(key)) is key