import sys
from collections.abc import Sequence

from levenshtein import distance, similarity

vocab = [
    "ball",
    "balls",
    "brawn",
    "flaw",
    "food",
    "fool",
    "kitten",
    "lawn",
    "lore",
    "sitting",
    "yawl",
    "yawn",
]


def suggest(word: str, words: Sequence[str], *, k: int = 3) -> list[tuple[str, int]]:
    ranked = sorted(words, key=lambda w: (-similarity(word, w), w))
    return [(w, distance(word, w)) for w in ranked[:k]]


if __name__ == "__main__":
    for word in sys.argv[1:] or ["yaw", "kiten", "flwa"]:
        print(word, "->", suggest(word, vocab))
