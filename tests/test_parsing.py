import pytest

from philosim.parsing import (
    ArgumentError,
    Config,
    has_invalid_digit,
    parse_args,
    parse_number,
    skip_space,
)


def test_skip_space_strips_leading_whitespace_only():
    assert skip_space(" \t\n\v\f\r42 ") == "42 "


def test_skip_space_keeps_text_without_whitespace():
    assert skip_space("+5") == "+5"


@pytest.mark.parametrize("text", ["123", "+5", "++5", "1+2", ""])
def test_has_invalid_digit_accepts(text):
    assert has_invalid_digit(text) is False


@pytest.mark.parametrize("text", ["-5", "5 ", "abc", "5+", "+", "1.5"])
def test_has_invalid_digit_rejects(text):
    assert has_invalid_digit(text) is True


def test_parse_number_plain():
    assert parse_number("42") == 42


def test_parse_number_leading_plus_and_space():
    assert parse_number("  ++7") == 7


def test_parse_number_int_max_is_accepted():
    assert parse_number("2147483647") == 2147483647


@pytest.mark.parametrize(
    "text", ["0", "2147483648", "00000000001", "", "   ", "abc", "-3", "5 "]
)
def test_parse_number_rejects(text):
    with pytest.raises(ArgumentError, match="invalid input"):
        parse_number(text)


def test_parse_args_without_meals():
    config = parse_args(["5", "800", "200", "200"])
    assert config == Config(5, 800, 200, 200, None)
    assert config.counts_meals is False


def test_parse_args_with_meals():
    config = parse_args(["5", "800", "200", "200", "7"])
    assert config.meals == 7
    assert config.counts_meals is True


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_parse_args_wrong_count(args):
    with pytest.raises(ArgumentError, match="wrong number of arguments"):
        parse_args(args)


def test_parse_args_invalid_value():
    with pytest.raises(ArgumentError, match="invalid input"):
        parse_args(["5", "800", "x", "200"])