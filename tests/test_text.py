import pytest

from algobox.text import (
    devowel,
    edit_distance,
    is_anagram,
    is_palindrome,
    min_steps_to_anagram,
    spellcheck,
)


@pytest.mark.parametrize("word", ["Racecar", "level", "a", "", "ABba"])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["hello", "ab", "Racecars"])
def test_non_palindromes(word):
    assert is_palindrome(word) is False


def test_palindrome_of_reversed_concatenation():
    for word in ["abc", "Kite", "xyz12"]:
        assert is_palindrome(word + word[::-1]) is True


@pytest.mark.parametrize(
    "s, t, expected",
    [("anagram", "mangaar", True), ("bab", "aba", False), ("friend", "family", False)],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_anagram_requires_equal_length():
    assert is_anagram("abc", "abcc") is False


def test_anagram_is_symmetric_and_reflexive():
    pairs = [("listen", "silent"), ("leetcode", "practice"), ("", "")]
    for s, t in pairs:
        assert is_anagram(s, t) == is_anagram(t, s)
        assert is_anagram(s, s) is True


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("bab", "aba", 1),
        ("leetcode", "practice", 5),
        ("anagram", "mangaar", 0),
        ("friend", "family", 4),
    ],
)
def test_min_steps_to_anagram(s, t, expected):
    assert min_steps_to_anagram(s, t) == expected


def test_min_steps_zero_exactly_for_anagrams():
    for s, t in [("anagram", "mangaar"), ("bab", "aba"), ("friend", "family")]:
        assert (min_steps_to_anagram(s, t) == 0) == is_anagram(s, t)


def test_min_steps_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        min_steps_to_anagram("abc", "ab")


def test_edit_distance_known_values():
    assert edit_distance("horse", "ros") == 3
    assert edit_distance("intention", "execution") == 5


def test_edit_distance_to_empty_is_length():
    for word in ["", "kite", "anagram"]:
        assert edit_distance(word, "") == len(word)
        assert edit_distance("", word) == len(word)


def test_edit_distance_identity_and_symmetry():
    words = ["kite", "KiTe", "hare", "leetcode", "practice"]
    for a in words:
        assert edit_distance(a, a) == 0
        for b in words:
            assert edit_distance(a, b) == edit_distance(b, a)


def test_edit_distance_triangle_inequality():
    words = ["kite", "keto", "hare", "hear", "friend", "family"]
    for a in words:
        for b in words:
            for c in words:
                assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_edit_distance_bounded_by_longer_length():
    for a, b in [("friend", "family"), ("bab", "aba"), ("leetcode", "practice")]:
        assert edit_distance(a, b) <= max(len(a), len(b))
        assert edit_distance(a, b) >= abs(len(a) - len(b))


def test_devowel():
    assert devowel("KiTe") == "k*t*"
    assert devowel("Hare") == "h*r*"


def test_devowel_preserves_length_and_is_idempotent():
    for word in ["keet", "HEAR", "anagram", ""]:
        result = devowel(word)
        assert len(result) == len(word)
        assert devowel(result) == result


def test_spellcheck_example():
    wordlist = ["KiTe", "kite", "hare", "Hare"]
    queries = ["kite", "Kite", "KiTe", "Hare", "HARE", "Hear", "hear", "keti", "keet", "keto"]
    assert spellcheck(wordlist, queries) == [
        "kite", "KiTe", "KiTe", "Hare", "hare", "", "", "KiTe", "", "KiTe",
    ]


def test_spellcheck_empty_wordlist():
    assert spellcheck([], ["kite", "hare"]) == ["", ""]


def test_spellcheck_exact_words_map_to_themselves():
    wordlist = ["KiTe", "kite", "hare", "Hare"]
    assert spellcheck(wordlist, wordlist) == wordlist