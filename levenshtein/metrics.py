"""
Edit distance metrics over arbitrary sequences.

Elements are compared with `==` only, so the same functions work on `str`
(compared code point by code point), `bytes`, and tuples or lists of tokens.
No case-folding or normalization is applied; callers normalize beforehand if
they need to.
"""

from collections.abc import Sequence

from levenshtein.types import T


def distance(s: Sequence[T], t: Sequence[T]) -> int:
    """
    Compute the Levenshtein distance between two sequences.

    The distance is the minimum number of single-element insertions,
    deletions, or substitutions needed to turn `s` into `t`. It is computed
    with two row buffers rather than the full matrix, iterating the shorter
    sequence as columns, so memory is linear in the shorter length.

    Args:
        s: The first sequence.
        t: The second sequence.

    Returns:
        The Levenshtein distance between the two sequences.

    Examples:
        ```python
        from levenshtein.metrics import distance

        assert distance("kitten", "sitting") == 3
        assert distance("", "abc") == 3
        assert distance((1, 2, 3), (3, 2, 1)) == 2
        ```

    """
    (s, t) = (t, s) if len(t) > len(s) else (s, t)
    n = len(t)
    prev = list(range(n + 1))
    curr = [0] * (n + 1)
    for i, a in enumerate(s):
        curr[0] = i + 1
        for j, b in enumerate(t):
            cost = 0 if a == b else 1
            curr[j + 1] = min(curr[j] + 1, prev[j + 1] + 1, prev[j] + cost)
        (prev, curr) = (curr, prev)
    return prev[n]


def similarity(s: Sequence[T], t: Sequence[T]) -> float:
    """
    Compute the Levenshtein distance normalized to a similarity in [0, 1].

    Args:
        s: The first sequence.
        t: The second sequence.

    Returns:
        `1 - distance(s, t) / max(len(s), len(t))`, or `1.0` if both are empty.

    Examples:
        ```python
        from levenshtein.metrics import similarity

        assert similarity("yawn", "yawl") == 0.75
        assert similarity("", "") == 1.0
        assert similarity("abc", "") == 0.0
        ```

    """
    longest = max(len(s), len(t))
    if longest == 0:
        return 1.0
    return 1.0 - distance(s, t) / longest
