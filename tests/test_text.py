import pytest

from yaweather.util.text import clean_integer, clean_nonprintable, strip_label, strip_multiline, to_int


@pytest.mark.parametrize(
    "raw, expected",
    [("42", "42"), (" 42 ", "42"), ("-42", "-42"), (" -42 ", "-42"), ("−5 °C", "-5"), ("str", "")],
)
def test_clean_integer(raw, expected):
    assert clean_integer(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), (" 42 ", 42), ("-42", -42), (" -42 ", -42), ("str 42 ", 42), ("str", 0), ("-", 0), ("", 0)],
)
def test_to_int_never_fails(raw, expected):
    assert to_int(raw) == expected


def test_clean_nonprintable_only_touches_thin_space():
    assert clean_nonprintable("745\u2009мм\u00a0рт") == "745 мм\u00a0рт"


def test_strip_label_and_multiline():
    assert strip_label("Влажность: 63%") == "63%"
    assert strip_label(" 63% ") == "63%"
    assert strip_multiline("\n  Погода\n   в Москве \n") == "Погода в Москве"
