import pytest

from easyproblems.strings import (
    abbreviate,
    binary_cut_pieces,
    cover_in_water,
    different_string,
    fox_snake,
    is_amusing_joke,
    is_pangram,
    min_doublings,
    ultra_fast_xor,
)


def test_amusing_joke_matching_pile():
    assert is_amusing_joke("SANTACLAUS", "DEDMOROZ", "SANTAMOROZDEDCLAUS") is True


def test_amusing_joke_extra_letter():
    assert is_amusing_joke("PAPAINOEL", "JOULUPUKKI", "JOULNAPAOILELUPUKKI") is False


def test_amusing_joke_pile_order_irrelevant():
    assert is_amusing_joke("AB", "C", "CBA") is True


def test_ultra_fast_xor_example():
    assert ultra_fast_xor("1010100", "0100101") == "1110001"


def test_ultra_fast_xor_self_is_zero():
    a = "1100101"
    assert ultra_fast_xor(a, a) == "0" * len(a)


def test_ultra_fast_xor_round_trip():
    a, b = "1010011", "0110110"
    assert ultra_fast_xor(a, ultra_fast_xor(a, b)) == b


def test_ultra_fast_xor_length_mismatch():
    with pytest.raises(ValueError):
        ultra_fast_xor("101", "1")


def test_abbreviate_long_word():
    assert abbreviate("localization") == "l10n"


@pytest.mark.parametrize("word", ["word", "abcdefghij", "a"])
def test_abbreviate_short_words_unchanged(word):
    assert abbreviate(word) == word


def test_abbreviate_structure():
    word = "pneumonoultramicroscopicsilicovolcanoconiosis"
    short = abbreviate(word)
    assert short[0] == word[0]
    assert short[-1] == word[-1]
    assert short[1:-1] == str(len(word) - 2)


def test_pangram_true():
    assert is_pangram("TheQuickBrownFoxJumpsOverTheLazyDog") is True


def test_pangram_false():
    assert is_pangram("toosmall") is False


def test_different_string_impossible():
    assert different_string("aaaa") is None
    assert different_string("z") is None


def test_different_string_two_letters():
    s = "ab"
    assert different_string(s) == s[::-1]


@pytest.mark.parametrize("s", ["codeforces", "aaaab", "xxyyzz", "abba"])
def test_different_string_is_permutation(s):
    result = different_string(s)
    assert result is not None and result != s
    assert sorted(result) == sorted(s)


def test_binary_cut_uniform():
    assert binary_cut_pieces("00000000") == binary_cut_pieces("1")


def test_binary_cut_sorted_needs_one_piece():
    assert binary_cut_pieces("0011") == binary_cut_pieces("0")


def test_binary_cut_single_descent():
    assert binary_cut_pieces("10") == binary_cut_pieces("0") + 1
    assert binary_cut_pieces("1100") == binary_cut_pieces("10")


def test_binary_cut_two_transitions():
    assert binary_cut_pieces("0110") == binary_cut_pieces("10")


def test_min_doublings_impossible():
    assert min_doublings("a", "b") == -1


@pytest.mark.parametrize(
    "x,s", [("a", "aaaaa"), ("eforc", "force"), ("ab", "ba"), ("abc", "b")]
)
def test_min_doublings_is_minimal(x, s):
    r = min_doublings(x, s)
    assert s in x * 2**r
    if r > 0:
        assert s not in x * 2 ** (r - 1)


@pytest.mark.parametrize("n", [3, 4, 10, 100])
def test_cover_in_water_long_run(n):
    assert cover_in_water("." * n) == cover_in_water("...")


def test_cover_in_water_long_run_value():
    assert cover_in_water("...") == 2


@pytest.mark.parametrize("s", ["#.#..#", ".#.#.", "##", "..#..#.."])
def test_cover_in_water_short_runs_one_each(s):
    assert cover_in_water(s) == s.count(".")


def test_cover_in_water_long_run_anywhere():
    assert cover_in_water(".#..#....") == cover_in_water("...")


def test_fox_snake_shape():
    rows, cols = 9, 5
    lines = fox_snake(rows, cols)
    assert len(lines) == rows
    assert all(len(line) == cols for line in lines)
    for line in lines[::2]:
        assert line == "#" * cols


def test_fox_snake_turns_alternate():
    lines = fox_snake(7, 4)
    turns = lines[1::2]
    for index, line in enumerate(turns):
        assert line.count("#") == 1
        if index % 2 == 0:
            assert line.endswith("#")
        else:
            assert line.startswith("#")