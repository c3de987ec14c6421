"""
Levenshtein distance over sequences encoded as integer JAX arrays.

This is the array counterpart of `levenshtein.metrics.distance`, for inputs that
are already integer ids (e.g., code points from `levenshtein.utils.codepoints`,
or token ids from a tokenizer). Each row of the sweep is computed in one
vectorized step, and the sweep over rows is a `jax.lax.scan` whose carry is the
previous row, so only two rows are ever live. The computation is compiled with
`jax.jit` once per pair of input shapes.
"""

import logging

import jax
import jax.lax as lax
import jax.numpy as jnp
import numpy as np
from jaxtyping import ArrayLike

from levenshtein.types import IS, IVX, IVY

logger = logging.getLogger(__name__)


def distance(s: ArrayLike, t: ArrayLike) -> IS:
    """
    Compute the Levenshtein distance between two integer sequences.

    Args:
        s: The first sequence, a 1D integer array (or list of ints).
        t: The second sequence, a 1D integer array (or list of ints).

    Returns:
        The Levenshtein distance as a 0-d integer array.

    Raises:
        ValueError: If either sequence is not 1D, does not have an
            integer dtype, or holds ids that do not fit the integer width
            JAX uses (`int32` unless `jax_enable_x64` is set).

    Examples:
        ```python
        from levenshtein.arrays import distance
        from levenshtein.utils import codepoints

        d = distance(codepoints("kitten"), codepoints("sitting"))
        assert d.item() == 3
        ```

    """
    (s, t) = (_validate_seq(s), _validate_seq(t))
    (s, t) = (t, s) if len(t) > len(s) else (s, t)
    return _distance(s, t)


@jax.jit
def _distance(s: IVX, t: IVY) -> IS:
    # runs at trace time only
    logger.debug("Tracing distance for shapes %s and %s", s.shape, t.shape)
    n = t.shape[0]
    idx = jnp.arange(n + 1)

    def _row(prev: IVY, x: tuple[IS, IS]) -> tuple[IVY, None]:
        (i, c) = x
        cost = (t != c).astype(prev.dtype)
        cands = jnp.minimum(prev[1:] + 1, prev[:-1] + cost)
        values = jnp.concatenate([jnp.atleast_1d(i + 1), cands])
        # curr[j + 1] = min(cands[j], curr[j] + 1), unrolled as a running min
        curr = lax.cummin(values - idx, axis=0) + idx
        return curr, None

    (prev, _) = lax.scan(_row, idx, (jnp.arange(s.shape[0]), s))
    return prev[n]


def _validate_seq(x: ArrayLike) -> IVX:
    if isinstance(x, str | bytes):
        msg = "Sequences must have integer dtype"
        raise ValueError(msg)
    # inspect on host before jax narrows the dtype
    x = np.asarray(x)
    if x.ndim != 1:
        msg = "Sequences must be 1D"
        raise ValueError(msg)
    if not np.issubdtype(x.dtype, np.integer):
        msg = "Sequences must have integer dtype"
        raise ValueError(msg)
    dtype = jax.dtypes.canonicalize_dtype(x.dtype)
    info = np.iinfo(dtype)
    if x.size and (int(x.min()) < info.min or int(x.max()) > info.max):
        msg = f"Sequence ids must fit in {dtype}"
        raise ValueError(msg)
    return jnp.asarray(x, dtype=dtype)
