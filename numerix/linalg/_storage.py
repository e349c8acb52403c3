"""
Storage buffer shared by a Matrix and its views.

The buffer is a contiguous 1D NumPy array plus a generation counter.
Reallocation swaps the array and bumps the generation; views remember
the generation they were created against and refuse access afterwards.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


class Storage:
    """
    Row-major flat buffer owned by exactly one Matrix.

    Attributes:
        data: 1D contiguous array of length rows * cols
        generation: Incremented on every reallocation
    """

    __slots__ = ('data', 'generation')

    def __init__(self, data: NDArray[Any]):
        self.data = data
        self.generation = 0

    @classmethod
    def zeros(cls, size: int, dtype: np.dtype) -> Storage:
        return cls(np.zeros(size, dtype=dtype))

    def reallocate(self, data: NDArray[Any]) -> None:
        """Replace the buffer, invalidating every view of the old one."""
        self.data = np.ascontiguousarray(data).reshape(-1)
        self.generation += 1

    def __repr__(self) -> str:
        return f"Storage(size={self.data.size}, dtype={self.data.dtype}, generation={self.generation})"
