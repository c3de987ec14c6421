"""
Miscellaneous helper functions.
"""

import jax.numpy as jnp

from levenshtein.types import IVX


def codepoints(text: str) -> IVX:
    """
    Encode a string as a 1D array of its Unicode code points.

    Args:
        text: The string to encode.

    Returns:
        An `int32` array with one entry per code point of `text`.

    Examples:
        ```python
        from levenshtein.utils import codepoints

        x = codepoints("héllo")
        assert x.shape == (5,)
        assert x[1] == ord("é")
        ```

    """
    return jnp.asarray([ord(c) for c in text], dtype=jnp.int32)
