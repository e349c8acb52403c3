"""
Core protocols for numerix.

MatrixLike names the read surface Gauss-Jordan and the other matrix
algorithms consume. It is used for annotations and for isinstance checks
in tests. Conformance at runtime is nominal: both Matrix and MatrixView
subclass numerix.linalg._base.MatrixBase, and check_system rejects any
operand that is not a MatrixBase, so an object that merely has this
surface is not accepted as a solver operand.
"""

from typing import Protocol, Any, Iterator, runtime_checkable

import numpy as np


@runtime_checkable
class MatrixLike(Protocol):
    """
    Contract consumed by Gauss-Jordan and the other matrix algorithms.

    Satisfied by both numerix.linalg.Matrix and numerix.linalg.MatrixView.
    """

    @property
    def shape(self) -> tuple[int, int]:
        """Logical (rows, cols)."""
        ...

    @property
    def n_rows(self) -> int:
        ...

    @property
    def n_cols(self) -> int:
        ...

    @property
    def dtype(self) -> np.dtype:
        ...

    def __getitem__(self, key: Any) -> Any:
        ...

    def __iter__(self) -> Iterator[Any]:
        ...

    def slice(self, rows: tuple[int, int, int], cols: tuple[int, int, int]) -> Any:
        """Zero-copy sub-selection by (start, count, step) per axis."""
        ...

    def to_numpy(self) -> np.ndarray:
        """Owning 2D copy in logical shape."""
        ...
