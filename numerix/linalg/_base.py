"""
Shared contract of owning matrices and non-owning views.

Everything here reads and writes through the (row, col) axis pair and the
shared Storage, so a Matrix and a MatrixView behave identically for
element access, iteration, slicing, arithmetic and rendering. Only
construction and reallocation differ, and those live in matrix.py.

Every access to the buffer goes through _buffer(), which verifies that the
storage generation still matches the one this object was created against.
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from numerix.core.compute.tolerances import select_tolerance
from numerix.core.exceptions import (
    ValidationError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidSliceError,
    UseAfterInvalidationError,
)
from numerix.core.validation import (
    check_array,
    check_index,
    check_product_shapes,
    check_same_shape,
    is_integer,
    is_scalar,
)
from numerix.linalg._axis import AxisDescriptor
from numerix.linalg._storage import Storage

if TYPE_CHECKING:
    from numerix.linalg.matrix import Matrix
    from numerix.linalg.view import MatrixView


Selection = tuple[int, int, int]


def _owning(values: NDArray[Any]) -> 'Matrix':
    from numerix.linalg.matrix import Matrix
    return Matrix.from_array(values)


def _unpack_selection(selection: Any, extent: int, axis: str) -> Selection:
    """Normalise None | (start, count) | (start, count, step)."""
    if selection is None:
        return 0, extent, 1
    try:
        parts = tuple(selection)
    except TypeError:
        raise InvalidSliceError(
            f"{axis} selection must be a (start, count, step) tuple, got {selection!r}",
            axis=axis, parent_count=extent,
        ) from None
    if len(parts) == 2:
        return parts[0], parts[1], 1
    if len(parts) == 3:
        return parts
    raise InvalidSliceError(
        f"{axis} selection must have 2 or 3 entries, got {len(parts)}",
        axis=axis, parent_count=extent,
    )


def _key_to_selection(item: Any, extent: int, axis: str) -> Selection:
    """Translate one position of a subscript (int or slice) into a selection."""
    if is_integer(item):
        if not 0 <= item < extent:
            raise IndexOutOfRangeError(
                f"{axis} index {item} out of range for extent {extent}",
            )
        return int(item), 1, 1
    if isinstance(item, slice):
        step = 1 if item.step is None else item.step
        if not is_integer(step) or step <= 0:
            raise InvalidSliceError(
                f"{axis} slice step must be a positive integer, got {item.step!r}",
                axis=axis, step=item.step, parent_count=extent,
            )
        start, stop, step = slice(item.start, item.stop, step).indices(extent)
        return start, len(range(start, stop, step)), step
    raise ValidationError(
        f"{axis} subscript must be an int or slice, got {type(item).__name__}"
    )


class MatrixBase:
    """
    Rectangular window onto a Storage buffer.

    Subclasses: Matrix (owns the storage) and MatrixView (borrows it).
    """

    DELIMITER = "\t"

    # Make numpy scalars defer to our reflected operators
    __array_ufunc__ = None
    __hash__ = None  # mutable

    def __init__(
        self,
        storage: Storage,
        row_axis: AxisDescriptor,
        col_axis: AxisDescriptor,
        generation: int,
    ):
        self._storage = storage
        self._row_axis = row_axis
        self._col_axis = col_axis
        self._generation = generation

    # --- Shape ---

    @property
    def n_rows(self) -> int:
        return self._row_axis.count

    @property
    def n_cols(self) -> int:
        return self._col_axis.count

    @property
    def shape(self) -> tuple[int, int]:
        return self._row_axis.count, self._col_axis.count

    @property
    def size(self) -> int:
        return self._row_axis.count * self._col_axis.count

    @property
    def dtype(self) -> np.dtype:
        return self._storage.data.dtype

    @property
    def axes(self) -> tuple[AxisDescriptor, AxisDescriptor]:
        """(row, col) descriptors against the underlying buffer."""
        return self._row_axis, self._col_axis

    @property
    def owns_data(self) -> bool:
        raise NotImplementedError

    # --- Buffer access ---

    def _buffer(self) -> NDArray[Any]:
        if self._generation != self._storage.generation:
            raise UseAfterInvalidationError(
                f"{type(self).__name__} was created against buffer generation "
                f"{self._generation}, but the owning matrix has been reallocated "
                f"(generation {self._storage.generation})",
                view_generation=self._generation,
                buffer_generation=self._storage.generation,
            )
        return self._storage.data

    def _flat_index(self, i: int, j: int) -> int:
        i, j = check_index(i, j, self.shape)
        return self._row_axis.resolve(i) + self._col_axis.resolve(j)

    def _index_grid(self) -> NDArray[np.intp]:
        return np.add.outer(self._row_axis.indices(), self._col_axis.indices())

    def _write(self, values: Any) -> None:
        """Store scalar or logical-shape values without unsafe casts."""
        buf = self._buffer()
        values = np.asarray(values)
        if not np.can_cast(values.dtype, buf.dtype, casting='same_kind'):
            raise ValidationError(
                f"cannot store {values.dtype} values in a {buf.dtype} matrix"
            )
        buf[self._index_grid()] = values

    # --- Element access ---

    def at(self, i: int, j: int) -> Any:
        """Value of element (i, j)."""
        return self._buffer()[self._flat_index(i, j)]

    def set(self, i: int, j: int, value: Any) -> None:
        """Assign element (i, j)."""
        flat = self._flat_index(i, j)
        buf = self._buffer()
        if not np.can_cast(np.asarray(value).dtype, buf.dtype, casting='same_kind'):
            raise ValidationError(
                f"cannot store {np.asarray(value).dtype} value in a {buf.dtype} matrix"
            )
        buf[flat] = value

    def ref(self, i: int, j: int) -> 'ElementRef':
        """Mutable handle to element (i, j)."""
        check_index(i, j, self.shape)
        return ElementRef(self, int(i), int(j))

    def __getitem__(self, key: Any) -> Any:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise ValidationError(f"expected a (row, col) subscript, got {len(key)} entries")
            i, j = key
            if is_integer(i) and is_integer(j):
                return self.at(i, j)
            return self.slice(
                _key_to_selection(i, self.n_rows, 'row'),
                _key_to_selection(j, self.n_cols, 'col'),
            )
        if is_integer(key):
            if not 0 <= key < self.n_rows:
                raise IndexOutOfRangeError(
                    f"row index {key} out of range for {self.n_rows} rows",
                    shape=self.shape,
                )
            return MatrixRow(self, int(key))
        if isinstance(key, slice):
            return self.slice(_key_to_selection(key, self.n_rows, 'row'), None)
        raise ValidationError(f"unsupported subscript type {type(key).__name__}")

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, tuple) and len(key) == 2 and is_integer(key[0]) and is_integer(key[1]):
            self.set(key[0], key[1], value)
            return
        target = self.row(key) if is_integer(key) else self[key]
        target.assign(value)

    # --- Slicing ---

    def slice(self, rows: Any = None, cols: Any = None) -> 'MatrixView':
        """
        Zero-copy rectangular sub-selection.

        Args:
            rows: (start, count, step) over this object's rows; None selects all
            cols: (start, count, step) over this object's columns; None selects all

        Returns:
            MatrixView addressing the original buffer directly

        Raises:
            InvalidSliceError: If step <= 0 or the selection exceeds this
                object's extent
        """
        from numerix.linalg.view import MatrixView

        self._buffer()
        row_axis = self._row_axis.compose(*_unpack_selection(rows, self.n_rows, 'row'), axis='row')
        col_axis = self._col_axis.compose(*_unpack_selection(cols, self.n_cols, 'col'), axis='col')
        return MatrixView(self._storage, row_axis, col_axis, self._generation)

    def row(self, i: int) -> 'MatrixView':
        """Row i as a 1 x n_cols view."""
        check_index(i, 0, (self.n_rows, max(self.n_cols, 1)))
        return self.slice((i, 1, 1), None)

    def col(self, j: int) -> 'MatrixView':
        """Column j as an n_rows x 1 view."""
        check_index(0, j, (max(self.n_rows, 1), self.n_cols))
        return self.slice(None, (j, 1, 1))

    def transpose(self) -> 'MatrixView':
        """Zero-copy transposed view (axes swapped)."""
        from numerix.linalg.view import MatrixView

        self._buffer()
        return MatrixView(self._storage, self._col_axis, self._row_axis, self._generation)

    @property
    def T(self) -> 'MatrixView':
        return self.transpose()

    # --- Iteration ---

    def __iter__(self) -> Iterator[Any]:
        row, col = self._row_axis, self._col_axis
        for i in range(row.count):
            base = row.resolve(i)
            for j in range(col.count):
                yield self._buffer()[base + col.resolve(j)]

    def elements(self) -> Iterator['ElementRef']:
        """Lazily yield mutable element handles in row-major order."""
        for i in range(self.n_rows):
            for j in range(self.n_cols):
                yield ElementRef(self, i, j)

    def iter_rows(self) -> Iterator['MatrixView']:
        """Lazily yield each row as a 1 x n_cols view."""
        for i in range(self.n_rows):
            yield self.row(i)

    # --- Bulk assignment / conversion ---

    def fill(self, value: Any) -> None:
        """Set every element to a scalar."""
        if not is_scalar(value):
            raise ValidationError(f"fill value must be a numeric scalar, got {type(value).__name__}")
        self._write(value)

    def assign(self, value: Any) -> None:
        """
        Overwrite the window with a scalar or equally shaped values.

        Args:
            value: Scalar (broadcast), Matrix/MatrixView, or array-like of
                exactly this object's logical shape

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        if is_scalar(value):
            self._write(value)
            return
        if isinstance(value, MatrixBase):
            check_same_shape(self.shape, value.shape, 'assign')
            self._write(value.to_numpy())
            return
        values = check_array(value, 'value')
        if values.shape != self.shape:
            raise DimensionMismatchError(
                f"assign: shape mismatch, {self.n_rows}x{self.n_cols} vs {values.shape}",
                left_shape=self.shape, operation='assign',
            )
        self._write(values)

    def to_numpy(self) -> NDArray[Any]:
        """Owning 2D copy of the logical window."""
        return self._buffer()[self._index_grid()]

    def __array__(self, dtype: Any = None, copy: Any = None) -> NDArray[Any]:
        values = self.to_numpy()
        if dtype is not None:
            values = values.astype(dtype, copy=False)
        return values

    def tolist(self) -> list[list[Any]]:
        return self.to_numpy().tolist()

    def copy(self) -> 'Matrix':
        """Owning deep copy in logical shape."""
        return _owning(self.to_numpy())

    # --- Arithmetic ---

    def _operand(self, other: Any, operation: str) -> Any:
        if isinstance(other, MatrixBase):
            check_same_shape(self.shape, other.shape, operation)
            return other.to_numpy()
        if is_scalar(other):
            return other
        return NotImplemented

    def __iadd__(self, other: Any):
        values = self._operand(other, '+=')
        if values is NotImplemented:
            return NotImplemented
        self._write(self.to_numpy() + values)
        return self

    def __isub__(self, other: Any):
        values = self._operand(other, '-=')
        if values is NotImplemented:
            return NotImplemented
        self._write(self.to_numpy() - values)
        return self

    def __imul__(self, other: Any):
        if not is_scalar(other):
            return NotImplemented
        self._write(self.to_numpy() * other)
        return self

    def __itruediv__(self, other: Any):
        if not is_scalar(other):
            return NotImplemented
        self._write(self.to_numpy() / other)
        return self

    def __add__(self, other: Any) -> 'Matrix':
        values = self._operand(other, '+')
        if values is NotImplemented:
            return NotImplemented
        return _owning(self.to_numpy() + values)

    def __radd__(self, other: Any) -> 'Matrix':
        if not is_scalar(other):
            return NotImplemented
        return _owning(other + self.to_numpy())

    def __sub__(self, other: Any) -> 'Matrix':
        values = self._operand(other, '-')
        if values is NotImplemented:
            return NotImplemented
        return _owning(self.to_numpy() - values)

    def __rsub__(self, other: Any) -> 'Matrix':
        if not is_scalar(other):
            return NotImplemented
        return _owning(other - self.to_numpy())

    def __matmul__(self, other: Any) -> 'Matrix':
        if not isinstance(other, MatrixBase):
            return NotImplemented
        check_product_shapes(self.shape, other.shape)
        return _owning(self.to_numpy() @ other.to_numpy())

    def __mul__(self, other: Any) -> 'Matrix':
        """Matrix product for matrix operands, scaling for scalars."""
        if isinstance(other, MatrixBase):
            return self.__matmul__(other)
        if is_scalar(other):
            return _owning(self.to_numpy() * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> 'Matrix':
        if not is_scalar(other):
            return NotImplemented
        return _owning(other * self.to_numpy())

    def __truediv__(self, other: Any) -> 'Matrix':
        if not is_scalar(other):
            return NotImplemented
        return _owning(self.to_numpy() / other)

    def __neg__(self) -> 'Matrix':
        return _owning(-self.to_numpy())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MatrixBase):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.to_numpy(), other.to_numpy()))

    def allclose(
        self,
        other: Any,
        rtol: float | None = None,
        atol: float | None = None,
        ill_conditioned: bool = False,
    ) -> bool:
        """
        Element-wise comparison within a tolerance tier.

        Args:
            other: Matrix/MatrixView or array-like of the same logical shape
            rtol: Relative tolerance. Default: tier of the common dtype
            atol: Absolute tolerance. Default: tier of the common dtype
            ill_conditioned: Use the relaxed tier, e.g. for solutions of
                systems with a large condition number

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        if isinstance(other, MatrixBase):
            values = other.to_numpy()
        else:
            values = check_array(other, 'other')
        check_same_shape(self.shape, values.shape, 'allclose')

        tier = select_tolerance(np.result_type(self.dtype, values.dtype), ill_conditioned)
        return bool(np.allclose(
            self.to_numpy(), values,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # --- Rendering ---

    def to_string(self, delimiter: str | None = None) -> str:
        """Rows on separate lines, columns joined by delimiter. Shape only."""
        delimiter = self.DELIMITER if delimiter is None else delimiter
        return "\n".join(delimiter.join(str(v) for v in row) for row in self.tolist())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.n_rows}x{self.n_cols}, dtype={self.dtype})"


class MatrixRow:
    """Row proxy giving m[i][j] read/write access."""

    __slots__ = ('_owner', '_row')

    def __init__(self, owner: MatrixBase, row: int):
        self._owner = owner
        self._row = row

    def __getitem__(self, j: int) -> Any:
        return self._owner.at(self._row, j)

    def __setitem__(self, j: int, value: Any) -> None:
        self._owner.set(self._row, j, value)

    def __len__(self) -> int:
        return self._owner.n_cols

    def __iter__(self) -> Iterator[Any]:
        for j in range(self._owner.n_cols):
            yield self._owner.at(self._row, j)

    def __repr__(self) -> str:
        return f"MatrixRow({self._row}, {list(self)})"


class ElementRef:
    """
    Mutable handle to one element of a matrix or view.

    Reads and writes go through the owner, so they see the current buffer
    and fail after invalidation like any other access.
    """

    __slots__ = ('_owner', '_row', '_col')

    def __init__(self, owner: MatrixBase, row: int, col: int):
        self._owner = owner
        self._row = row
        self._col = col

    @property
    def index(self) -> tuple[int, int]:
        return self._row, self._col

    @property
    def value(self) -> Any:
        return self._owner.at(self._row, self._col)

    @value.setter
    def value(self, value: Any) -> None:
        self._owner.set(self._row, self._col, value)

    def get(self) -> Any:
        return self.value

    def set(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ElementRef({self._row}, {self._col}, value={self.value!r})"
