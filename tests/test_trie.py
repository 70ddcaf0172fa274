import pytest

from dsakit.trie import Trie, word_break


@pytest.fixture
def trie():
    t = Trie()
    for word in ("apple", "app", "bat"):
        t.insert(word)
    return t


@pytest.mark.parametrize(
    "word, expected", [("apple", True), ("app", True), ("appl", False), ("bat", True)]
)
def test_search(trie, word, expected):
    assert trie.search(word) is expected


@pytest.mark.parametrize(
    "prefix, expected", [("ap", True), ("ba", True), ("cat", False), ("", True)]
)
def test_starts_with(trie, prefix, expected):
    assert trie.starts_with(prefix) is expected


def test_contains_and_constructor_words():
    t = Trie(["dog", "door"])
    assert "door" in t
    assert "do" not in t
    assert t.starts_with("do")


def test_empty_trie():
    t = Trie()
    assert not t.search("a")
    assert not t.starts_with("a")


@pytest.mark.parametrize(
    "text, words, expected",
    [
        ("leetcode", ["leet", "code"], True),
        ("applepenapple", ["apple", "pen"], True),
        ("catsandog", ["cats", "dog", "sand", "and", "cat"], False),
        ("", ["a"], True),
    ],
)
def test_word_break(text, words, expected):
    assert word_break(text, words) is expected


def test_word_break_long_unsplittable_input():
    assert word_break("a" * 200 + "b", ["a", "aa", "aaa"]) is False