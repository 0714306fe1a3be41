import pytest

from cub3d.libft.transform import itoa, split, strjoin, strmapi, striteri, strtrim, substr


def test_substr_inside_string():
    s = "tripouille"
    result = substr(s, 3, 4)
    assert len(result) == 4
    assert s.startswith(result, 3)


def test_substr_start_past_end_is_empty():
    assert substr("tripouille", 100, 20) == ""


def test_substr_length_past_end_is_cut():
    s = "tripouille"
    result = substr(s, 3, 50)
    assert len(result) == len(s) - 3
    assert s.endswith(result)


def test_substr_none():
    assert substr(None, 0, 3) is None


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    a, b = "Maremma ", "zucchina"
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strjoin_both_none():
    assert strjoin(None, None) is None


def test_strjoin_one_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_source_example():
    s = "    - ciao mondo "
    result = strtrim(s, " ")
    assert result in s
    assert not result.startswith(" ")
    assert not result.endswith(" ")
    assert result.startswith("-")


def test_strtrim_set_of_chars():
    assert strtrim("xyabcyx", "xy") == "abc"


def test_strtrim_everything_removed():
    assert strtrim("    ", " ") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim(" a ", "") == " a "


def test_strtrim_none():
    assert strtrim(None, " ") is None


def test_split_source_example():
    assert split("  coso  42  ", " ") == ["coso", "42"]


@pytest.mark.parametrize("s", ["255,0,10", ",,a,,b,", "one", ",,,"])
def test_split_invariants(s):
    parts = split(s, ",")
    assert all(parts)
    assert all("," not in p for p in parts)
    assert "".join(parts) == s.replace(",", "")


def test_split_empty():
    assert split("", ",") == []


def test_split_nul_delimiter_keeps_whole():
    assert split("abc", "\0") == ["abc"]


def test_split_bad_delimiter():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 1234, -98765, 2147483647])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_rejects_float():
    with pytest.raises(TypeError):
        itoa(1.5)


def test_strmapi_applies_function():
    s = "abc"
    assert strmapi(s, lambda i, c: c.upper()) == s.upper()


def test_strmapi_passes_indices():
    seen = []

    def record(i, c):
        seen.append(i)
        return c

    s = "hello"
    assert strmapi(s, record) == s
    assert seen == list(range(len(s)))


def test_striteri_modifies_in_place():
    chars = list("abc")

    def upper(i, seq):
        seq[i] = seq[i].upper()

    striteri(chars, upper)
    assert "".join(chars) == "abc".upper()


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    seen = []
    striteri(chars, lambda i, seq: seen.append(i))
    assert seen == [0, 1]