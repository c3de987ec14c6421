"""
Levenshtein edit distance between sequences.

The edit distance is the minimum number of single-element insertions,
deletions, or substitutions needed to transform one sequence into another.
Text is compared one Unicode code point at a time, with exact equality.

Modules:
- `levenshtein.metrics`: The edit distance over arbitrary sequences
    (`str`, `bytes`, tuples of tokens, ...), plus a normalized similarity.
- `levenshtein.arrays`: The same distance over 1D integer JAX arrays,
    compiled with `jax.jit`.
- `levenshtein.utils`: Miscellaneous helper functions for the library.
"""

from levenshtein import arrays, metrics, utils
from levenshtein.metrics import distance, similarity

__all__ = [
    "arrays",
    "distance",
    "metrics",
    "similarity",
    "utils",
]
