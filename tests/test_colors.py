import pytest

from cubraycast.colors import color_by_name


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("gray100", 0xFFFFFF),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, value):
    assert color_by_name(name) == value


def test_lookup_ignores_case():
    assert color_by_name("RED") == color_by_name("red")
    assert color_by_name("Ghost White") == color_by_name("ghost white")


def test_repeated_name_resolves_to_first_entry():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_none_marks_transparency():
    assert color_by_name("none") == -1
    assert color_by_name("NONE") == -1


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("no such colour")


def test_spaced_and_joined_spellings_agree():
    assert color_by_name("navy blue") == color_by_name("navyblue")
    assert color_by_name("dim gray") == color_by_name("dimgrey")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_levels_match_and_are_neutral(level):
    gray = color_by_name(f"gray{level}")
    assert gray == color_by_name(f"grey{level}")
    red, green, blue = (gray >> 16) & 0xFF, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue
    assert 0 <= gray <= 0xFFFFFF


def test_gray_levels_increase():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == color_by_name("black")
    assert values[-1] == color_by_name("white")