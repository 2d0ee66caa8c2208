import pytest

from logic.text_layout import (
    NBSP,
    blank_if_empty,
    follow_case,
    pad_center,
    pad_fixed_length,
)


def _units(value: str, padding: str = NBSP) -> int:
    count = value.count(padding)
    return count + len(value.replace(padding, ""))


def test_pad_fixed_length_lead_and_trail():
    out = pad_fixed_length("123", 2, 8)
    assert out == NBSP * 2 + "123" + NBSP * 3
    assert _units(out) == 8


@pytest.mark.parametrize("text,lead,total", [("", 0, 5), ("3201", 1, 16), ("ab", 3, 5)])
def test_pad_fixed_length_total_units(text, lead, total):
    assert _units(pad_fixed_length(text, lead, total)) == total


def test_pad_fixed_length_no_trail_when_lead_fills_width():
    assert pad_fixed_length("abcd", 3, 5) == NBSP * 3 + "abcd"


def test_pad_fixed_length_with_plain_space():
    assert pad_fixed_length("x", 1, 4, padding=" ") == " x  "


def test_pad_center_even_difference():
    assert pad_center("ab", 6) == NBSP * 2 + "ab" + NBSP * 2


def test_pad_center_odd_difference_extra_unit_on_right():
    out = pad_center("abc", 6, padding=" ")
    assert out == " abc  "
    assert len(out) == 6


@pytest.mark.parametrize("total", [0, 2, 3])
def test_pad_center_no_op_when_too_short(total):
    assert pad_center("abc", total) == "abc"


def test_blank_if_empty():
    assert blank_if_empty("") == "-"
    assert blank_if_empty(None) == "-"
    assert blank_if_empty("x") == "x"


@pytest.mark.parametrize(
    "fmt,expected",
    [("NAMA", "BUDI SANTOSO"), ("Nama", "Budi Santoso"), ("nama", "budi santoso")],
)
def test_follow_case(fmt, expected):
    assert follow_case(fmt, "bUDI santoso") == expected


def test_follow_case_single_upper_char_format():
    assert follow_case("N", "budi") == "Budi"


@pytest.mark.parametrize(
    "text,expected",
    [("MA'RUF AMIN", "Ma'ruf Amin"), ("siti nur-aini", "Siti Nur-aini")],
)
def test_follow_case_capitalises_only_after_spaces(text, expected):
    assert follow_case("Nama", text) == expected


def test_blank_if_empty_keeps_zero_string():
    assert blank_if_empty("0") == "0"
    assert blank_if_empty(0) == "-"
