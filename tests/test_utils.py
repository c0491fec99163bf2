import pytest

from cubraycast.utils import (
    INT_MAX,
    CubError,
    atoi,
    check_extension,
    is_digit_str,
    is_empty_line,
    split,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("map.cub", True),
        ("maps/level.cub", True),
        (".cub", True),
        ("map.txt", False),
        ("map.cub.bak", False),
        ("cub", False),
        ("", False),
    ],
)
def test_check_extension(name, expected):
    assert check_extension(name) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("0", True), ("", True), ("12a", False), ("-1", False), (" 1", False)],
)
def test_is_digit_str(text, expected):
    assert is_digit_str(text) is expected


@pytest.mark.parametrize(
    "line, expected",
    [("", True), (" \t\n", True), ("\v\f\r", True), (" a ", False), ("1", False)],
)
def test_is_empty_line(line, expected):
    assert is_empty_line(line) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -17", -17),
        ("+8", 8),
        ("\t\n255", 255),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("-", 0),
        ("2147483647", 2147483647),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_max_is_int_max():
    assert atoi("2147483647") == INT_MAX


def test_atoi_roundtrip_small_numbers():
    for value in range(-300, 301):
        assert atoi(str(value)) == value


def test_split_drops_empty_pieces():
    assert split("a,,b,c", ",") == ["a", "b", "c"]


def test_split_leading_and_trailing_separators():
    assert split(",x,y,", ",") == ["x", "y"]


def test_split_only_separators():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_lines():
    assert split("111\n101\n\n111\n", "\n") == ["111", "101", "111"]


def test_cub_error_carries_message():
    error = CubError("wall error")
    assert isinstance(error, Exception)
    assert str(error) == "wall error"