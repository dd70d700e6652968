import pytest

from minishell.printf import format_string, printf


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_sign():
    assert format_string("100%%") == "100%"


def test_null_string():
    assert format_string("NULL %s NULL", None) == "NULL (null) NULL"


def test_nil_pointer():
    assert format_string("%p", 0) == "(nil)"
    assert format_string("%p", None) == "(nil)"


def test_int_minimum():
    assert format_string("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 42, -42, 2147483647, -7])
def test_signed_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


@pytest.mark.parametrize("n", [0, 1, 42, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    low = format_string("%x", n)
    assert int(low, 16) == n
    assert format_string("%X", n) == low.upper()


def test_unsigned_wraps_negative():
    assert int(format_string("%u", -1)) == 0xFFFFFFFF
    assert int(format_string("%x", -1), 16) == 0xFFFFFFFF


def test_signed_wraps_overflow():
    assert int(format_string("%d", 2147483648)) == -2147483648


def test_pointer_round_trip():
    text = format_string("%p", 0x1234ABCD)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234ABCD


def test_char_from_code_and_string():
    assert format_string("%c%c", 65, "B") == "AB"


def test_mixed_conversions():
    assert format_string("%c-%s-%d", "x", "yz", 3) == "x-yz-3"


def test_unknown_conversion_prints_nothing_and_uses_no_argument():
    assert format_string("a%qb%d", 5) == "ab5"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_char_needs_single_character():
    with pytest.raises(ValueError):
        format_string("%c", "ab")


def test_printf_writes_and_returns_length(capsys):
    length = printf("%s=%d%%", "n", 12)
    captured = capsys.readouterr().out
    assert captured == format_string("%s=%d%%", "n", 12)
    assert length == len(captured)