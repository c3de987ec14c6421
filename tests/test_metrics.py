import string
from itertools import product

from levenshtein.metrics import distance, similarity

WORDS = ["".join(w) for k in range(4) for w in product("ab", repeat=k)]


def test_distance() -> None:
    assert distance("kitten", "sitting") == 3
    assert distance("fool", "foo") == 1
    assert distance("lore", "lo") == 2
    assert distance("ball", "balls") == 1
    assert distance("fo", "food") == 2
    assert distance("yawn", "yawl") == 1
    assert distance("yawn", "brawn") == 2
    assert distance("flaw", "lawn") == 2
    assert distance("", "") == 0


def test_distance_empty() -> None:
    s = "abc"
    assert distance("", s) == distance(s, "") == len(s)

    s = string.printable
    t = s[::-1]
    assert len(s) % 2 == 0
    assert distance(s, t) == distance(t, s) == len(s)


def test_distance_sequences() -> None:
    s1 = (1, 2, 3)
    s2 = (3, 2, 1)
    assert distance(s1, s2) == distance(s2, s1) == len(s1) - 1
    assert distance(list(s1), list(s2)) == len(s1) - 1
    assert distance(b"kitten", b"sitting") == 3
    assert distance(["the", "cat", "sat"], ["the", "dog", "sat"]) == 1


def test_distance_codepoints() -> None:
    assert distance("héllo", "hello") == 1
    assert distance("日本語", "日本") == 1
    # no normalization: precomposed vs combining sequence
    assert distance("\u00e9", "e\u0301") == 2
    assert distance("Hello", "hello") == 1


def test_distance_properties() -> None:
    for x in WORDS:
        assert distance(x, x) == 0
        assert distance("", x) == len(x)
    for x, y in product(WORDS, repeat=2):
        assert distance(x, y) == distance(y, x) >= 0
        assert distance(x, y) <= max(len(x), len(y))
    for x, y, z in product(WORDS, repeat=3):
        assert distance(x, z) <= distance(x, y) + distance(y, z)


def test_distance_single_edit() -> None:
    x = "lever"
    for i in range(len(x) + 1):
        assert distance(x, x[:i] + "z" + x[i:]) == 1
    for i in range(len(x)):
        assert distance(x, x[:i] + x[i + 1 :]) == 1
        assert distance(x, x[:i] + "z" + x[i + 1 :]) == 1


def test_similarity() -> None:
    assert similarity("", "") == 1.0
    assert similarity("abc", "abc") == 1.0
    assert similarity("abc", "") == similarity("", "abc") == 0.0
    assert similarity("yawn", "yawl") == 0.75
    assert similarity("kitten", "sitting") == 1.0 - 3 / 7
    for x, y in product(WORDS, repeat=2):
        assert 0.0 <= similarity(x, y) == similarity(y, x) <= 1.0
