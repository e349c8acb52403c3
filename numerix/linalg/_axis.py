"""
Axis descriptors: one dimension's addressing inside a flat buffer.

An axis is the triple {offset, count, stride}. Element k of the axis lives
at flat index ``offset + k * stride``. A matrix or view is a pair of axes
over a shared row-major buffer; element (i, j) resolves to

    row.offset + i * row.stride + col.offset + j * col.stride

Sub-selecting an axis composes a new descriptor against the original
buffer, so views of views never chain through their parents.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from numerix.core.exceptions import InvalidSliceError
from numerix.core.validation import is_integer


@dataclass(frozen=True)
class AxisDescriptor:
    """
    Addressing of one matrix dimension within a flat buffer.

    Attributes:
        offset: Flat index of the first selected element
        count: Number of selected elements (>= 0)
        stride: Flat distance between consecutive selected elements
    """
    offset: int
    count: int
    stride: int

    @classmethod
    def rows_of(cls, n_rows: int, n_cols: int) -> AxisDescriptor:
        """Row axis of an owning n_rows x n_cols buffer."""
        return cls(offset=0, count=n_rows, stride=n_cols)

    @classmethod
    def cols_of(cls, n_cols: int) -> AxisDescriptor:
        """Column axis of an owning buffer with n_cols columns."""
        return cls(offset=0, count=n_cols, stride=1)

    def resolve(self, index: int) -> int:
        """Flat-buffer contribution of local index. No bounds check."""
        return self.offset + index * self.stride

    def indices(self) -> NDArray[np.intp]:
        """Flat-buffer contributions of every selected element."""
        return self.offset + np.arange(self.count, dtype=np.intp) * self.stride

    def compose(
        self,
        start: int,
        count: int,
        step: int = 1,
        axis: str = 'row',
    ) -> AxisDescriptor:
        """
        Derive the descriptor of a local (start, count, step) selection.

        The new descriptor addresses the original buffer directly:

            offset = self.offset + start * self.stride
            stride = self.stride * step
            count  = count

        Args:
            start: Local index of the first selected element
            count: Number of elements to select
            step: Local distance between selected elements
            axis: 'row' or 'col', for error messages

        Returns:
            Composed AxisDescriptor

        Raises:
            InvalidSliceError: If step <= 0, start or count is negative, or
                the selection runs past this axis' count
        """
        def fail(reason: str) -> InvalidSliceError:
            return InvalidSliceError(
                f"{axis} slice (start={start}, count={count}, step={step}): {reason}",
                axis=axis, start=start, count=count, step=step,
                parent_count=self.count,
            )

        if not (is_integer(start) and is_integer(count) and is_integer(step)):
            raise fail("start, count and step must be integers")
        if step <= 0:
            raise fail("step must be positive")
        if start < 0 or count < 0:
            raise fail("start and count must be non-negative")

        if count == 0:
            if start > self.count:
                raise fail(f"start exceeds parent extent {self.count}")
        else:
            last = start + (count - 1) * step
            if last >= self.count:
                raise fail(f"last index {last} exceeds parent extent {self.count}")

        return AxisDescriptor(
            offset=self.offset + int(start) * self.stride,
            count=int(count),
            stride=self.stride * int(step),
        )
