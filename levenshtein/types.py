# ruff: noqa: D100

from typing import TypeVar

from jaxtyping import Array, Int

# Generics
T = TypeVar("T")

# Vectors of Ints
IVX = Int[Array, " x"]
IVY = Int[Array, " y"]

# Scalar Types
IS = Int[Array, ""]
