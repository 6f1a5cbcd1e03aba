import pytest

from baseconvert.conversion import (
    INVALID_TOKEN_MESSAGE,
    InvalidTokenError,
    convert,
    convert_range,
    convert_stream,
    to_base,
)


def test_hex_pinned():
    assert to_base(255, 16) == "FF"


def test_zero():
    assert to_base(0, 2) == "0"


@pytest.mark.parametrize("base", [2, 3, 8, 10, 16, 36])
@pytest.mark.parametrize("number", [-1000, -37, -1, 1, 9, 35, 36, 4095, 123456789])
def test_round_trip(base, number):
    assert int(to_base(number, base), base) == number


def test_base_ten_matches_decimal():
    assert [to_base(n, 10) for n in range(-20, 21)] == [str(n) for n in range(-20, 21)]


def test_letters_only_for_sixteen_and_thirty_six():
    assert to_base(10, 12) == ""
    assert all(ch.isdigit() for n in range(500) for ch in to_base(n, 12))


def test_base_thirty_six_is_upper_case():
    text = to_base(10**12, 36)
    assert text == text.upper()


@pytest.mark.parametrize("base", [0, 1, 37])
def test_invalid_base(base):
    with pytest.raises(ValueError):
        to_base(5, base)


def test_range_inclusive():
    assert list(convert_range(10, -3, 3)) == [str(n) for n in range(-3, 4)]


def test_range_backwards_is_empty():
    assert list(convert_range(16, 5, 1)) == []


def test_range_in_binary_round_trips():
    values = [int(text, 2) for text in convert_range(2, -3, 3)]
    assert values == list(range(-3, 4))


def test_stream_reads_all_numbers():
    assert list(convert_stream(16, "10 255\n-4\n")) == [
        to_base(10, 16),
        to_base(255, 16),
        to_base(-4, 16),
    ]


def test_stream_empty():
    assert list(convert_stream(16, "   \n")) == []


def test_stream_chunks_join_tokens():
    assert list(convert_stream(10, ["1", "2 3\n"])) == ["12", "3"]


def test_stream_adjacent_signed_numbers():
    assert list(convert_stream(10, "5-3")) == ["5", "-3"]


def test_stream_trailing_sign_ends_quietly():
    assert list(convert_stream(10, "5 -\n")) == ["5"]


def test_stream_invalid_token_after_output():
    produced = []
    with pytest.raises(InvalidTokenError) as info:
        for line in convert_stream(10, "7 8 abc 9"):
            produced.append(line)
    assert produced == ["7", "8"]
    assert str(info.value) == INVALID_TOKEN_MESSAGE
    assert info.value.token == "abc"


def test_stream_sign_followed_by_number_is_error():
    with pytest.raises(InvalidTokenError):
        list(convert_stream(10, "- 5"))


def test_stream_trailing_letters_after_number():
    produced = []
    with pytest.raises(InvalidTokenError):
        for line in convert_stream(10, "12abc"):
            produced.append(line)
    assert produced == ["12"]


def test_convert_uses_stream_without_range():
    assert list(convert(10, 0, 0, "4 5")) == ["4", "5"]


def test_convert_uses_range_when_set():
    assert list(convert(10, 0, 2, "99")) == ["0", "1", "2"]