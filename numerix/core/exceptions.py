"""
Exception hierarchy for numerix.

All exceptions inherit from NumerixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Structural errors (shape, index, slice) are raised eagerly at the
      call that violates the invariant
    - Numeric degeneracies are only raised where a caller opted in
"""


class NumerixError(Exception):
    """Base exception for all numerix errors."""
    pass


class ValidationError(NumerixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for construction-time extent errors and operand shape
    mismatches.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    A matrix was requested with a negative or non-integral extent.

    Attributes:
        rows: Requested row count
        cols: Requested column count
    """

    def __init__(
        self,
        message: str,
        rows: object | None = None,
        cols: object | None = None,
    ):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class DimensionMismatchError(DimensionError):
    """
    Operands of an arithmetic or augmentation have incompatible shapes.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
        operation: Name of the attempted operation (e.g. '+=', 'matmul')
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element access beyond the current logical shape.

    Also an IndexError, so code written against the sequence protocol
    keeps working.

    Attributes:
        index: The offending (row, col) pair
        shape: Logical shape of the accessed matrix or view
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class InvalidSliceError(ValidationError):
    """
    A slice selection is malformed or exceeds its parent's extent.

    Raised for a zero or negative step, a negative start or count, or a
    selection whose last index lies beyond the parent axis' count.

    Attributes:
        axis: 'row' or 'col'
        start: Requested local start
        count: Requested element count
        step: Requested step
        parent_count: Element count of the parent axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        start: int | None = None,
        count: int | None = None,
        step: int | None = None,
        parent_count: int | None = None,
    ):
        super().__init__(message)
        self.axis = axis
        self.start = start
        self.count = count
        self.step = step
        self.parent_count = parent_count


class UseAfterInvalidationError(NumerixError):
    """
    A view was accessed after its owning matrix reallocated its storage.

    Resizing or augmenting a Matrix in place replaces its buffer and
    bumps the buffer generation. Views record the generation they were
    sliced from and refuse access once it no longer matches.

    Attributes:
        view_generation: Generation recorded by the view
        buffer_generation: Current generation of the buffer
    """

    def __init__(
        self,
        message: str,
        view_generation: int | None = None,
        buffer_generation: int | None = None,
    ):
        super().__init__(message)
        self.view_generation = view_generation
        self.buffer_generation = buffer_generation


class NumericalError(NumerixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised by elimination when the caller asked for singularity checks and
    a pivot falls below the numerical threshold.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot: The offending pivot value, if available
        row: Row at which elimination stopped
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot: complex | float | None = None,
        row: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot = pivot
        self.row = row


class ConvergenceError(NumerixError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative method (bracketing, Newton, Steffensen)
    fails to meet its convergence criteria within the iteration cap.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final step size or bracket width
        reason: Why convergence failed (e.g., 'max_iterations', 'diverging')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
