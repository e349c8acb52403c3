"""
Non-owning matrix views.

A MatrixView is a rectangular window described by a pair of axis
descriptors over a Storage buffer owned by some Matrix. Views are produced
by slicing a Matrix or another view; slicing a view composes descriptors
against the original buffer, so element access stays O(1) regardless of
nesting depth.

Views alias their owner: writes through any view are visible through the
owner and through every overlapping view. A view is only valid for the
buffer generation it was created against. After the owner is resized or
augmented in place, every access raises UseAfterInvalidationError.
"""

from __future__ import annotations

from numerix.linalg._axis import AxisDescriptor
from numerix.linalg._base import MatrixBase
from numerix.linalg._storage import Storage


class MatrixView(MatrixBase):
    """
    Mutable, aliasing window onto a Matrix's storage.

    Do not construct directly; use Matrix.slice(), MatrixView.slice(),
    subscripting with slices, row(), col() or transpose().
    """

    def __init__(
        self,
        storage: Storage,
        row_axis: AxisDescriptor,
        col_axis: AxisDescriptor,
        generation: int,
    ):
        super().__init__(storage, row_axis, col_axis, generation)

    @property
    def owns_data(self) -> bool:
        return False

    @property
    def generation(self) -> int:
        """Buffer generation this view was sliced from."""
        return self._generation

    @property
    def is_valid(self) -> bool:
        """False once the owning matrix has reallocated its buffer."""
        return self._generation == self._storage.generation
