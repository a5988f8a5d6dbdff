"""Small dense matrices and the 2D transforms used to move particle shapes."""

from __future__ import annotations

import math

_TOLERANCE = 0.001


class Matrix:
    """A rows x cols matrix of floats, initialised to zero."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows, cols):
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._data = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def _from_rows(cls, data, cols):
        result = Matrix(len(data), cols)
        result._data = [list(row) for row in data]
        return result

    @property
    def rows(self):
        """Number of rows."""
        return self._rows

    @property
    def cols(self):
        """Number of columns."""
        return self._cols

    def _check(self, index):
        i, j = index
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise IndexError(
                f"index ({i}, {j}) out of range for {self._rows}x{self._cols} matrix"
            )
        return i, j

    def __getitem__(self, index):
        i, j = self._check(index)
        return self._data[i][j]

    def __setitem__(self, index, value):
        i, j = self._check(index)
        self._data[i][j] = float(value)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._cols:
            raise ValueError("dimensions must agree")
        data = [
            [x + y for x, y in zip(row, other._data[i])]
            for i, row in enumerate(self._data)
        ]
        return Matrix._from_rows(data, self._cols)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError("dimensions must agree")
        columns = list(zip(*other._data)) if other._rows else [()] * other._cols
        data = [
            [sum(x * y for x, y in zip(row, column)) for column in columns]
            for row in self._data
        ]
        return Matrix._from_rows(data, other._cols)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._rows != other._rows or self._cols != other._cols:
            return False
        return all(
            abs(x - y) < _TOLERANCE
            for row_a, row_b in zip(self._data, other._data)
            for x, y in zip(row_a, row_b)
        )

    def __ne__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._rows != other._rows or self._cols != other._cols:
            return True
        return any(
            abs(x - y) > _TOLERANCE
            for row_a, row_b in zip(self._data, other._data)
            for x, y in zip(row_a, row_b)
        )

    def __str__(self):
        return "".join(
            "".join(f"{value:>10g} " for value in row) + "\n" for row in self._data
        )

    def __repr__(self):
        return f"{type(self).__name__}({self._rows}x{self._cols}, {self._data!r})"

    def copy(self):
        """Return an independent copy as a plain Matrix."""
        return Matrix._from_rows(self._data, self._cols)


class RotationMatrix(Matrix):
    """2x2 counter-clockwise rotation by ``theta`` radians."""

    def __init__(self, theta):
        super().__init__(2, 2)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        self._data = [[cos_t, -sin_t], [sin_t, cos_t]]


class ScalingMatrix(Matrix):
    """2x2 uniform scaling by ``scale``."""

    def __init__(self, scale):
        super().__init__(2, 2)
        self._data = [[float(scale), 0.0], [0.0, float(scale)]]


class TranslationMatrix(Matrix):
    """2 x n matrix whose columns all hold the shift (x_shift, y_shift)."""

    def __init__(self, x_shift, y_shift, n_cols):
        super().__init__(2, n_cols)
        self._data = [[float(x_shift)] * n_cols, [float(y_shift)] * n_cols]