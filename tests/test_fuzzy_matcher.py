import pytest

from blaze.fuzzy_matcher import (
    MatchResult,
    calculate_match,
    fuzzy_match,
    is_word_boundary,
)


@pytest.mark.parametrize(
    "s, i, expected",
    [
        ("a", 0, True),
        ("fooBar", 3, True),
        ("foobar", 3, False),
        ("foo bar", 4, True),
        ("foo_bar", 4, True),
        ("FOO", 1, False),
        ("Foo", 1, False),
    ],
)
def test_is_word_boundary(s, i, expected):
    assert is_word_boundary(s, i) is expected


def test_exact_match_score():
    result = calculate_match("abc", "abc")
    assert result == MatchResult("abc", 1120, [0, 1, 2])


def test_scattered_match_score():
    result = calculate_match("fb", "foo_bar")
    assert result.match_indices == [0, 4]
    assert result.score == 1050


def test_no_match():
    assert calculate_match("xyz", "abc") == MatchResult("abc", -1, [])


def test_not_enough_room_left():
    assert calculate_match("ab", "xa").score == -1


def test_query_longer_than_line():
    assert calculate_match("abcd", "abc").score == -1


def test_case_insensitive():
    lower = calculate_match("abc", "xabc")
    upper = calculate_match("ABC", "xabc")
    assert upper.match_indices == lower.match_indices == [1, 2, 3]
    assert upper.score == lower.score


def test_indices_point_at_query_chars():
    query, line = "gst", "get some text"
    result = calculate_match(query, line)
    assert result.match_indices == sorted(result.match_indices)
    assert "".join(line[i] for i in result.match_indices).lower() == query


def test_compact_beats_spread():
    assert calculate_match("abc", "abc").score > calculate_match("abc", "axbxc").score


def test_early_beats_late():
    assert calculate_match("abc", "abc---").score > calculate_match("abc", "---abc").score


def test_empty_query_raises():
    with pytest.raises(ValueError):
        calculate_match("", "abc")


def test_fuzzy_match_no_entries():
    assert fuzzy_match("ab", []) == []