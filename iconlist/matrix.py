"""Dense matrices of floats with determinants and minors."""

from dataclasses import dataclass, field
from typing import List, Optional


def kronecker_delta(i, j):
    """True when the two indices are equal."""
    return i == j


@dataclass
class Matrix:
    """A ``rows`` by ``cols`` matrix; ``table`` defaults to all zeros."""

    rows: int
    cols: int
    table: Optional[List[List[float]]] = field(default=None)

    def __post_init__(self):
        if self.rows < 0 or self.cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        if self.table is None:
            self.table = [[0.0] * self.cols for _ in range(self.rows)]
            return
        table = [[float(value) for value in row] for row in self.table]
        if len(table) != self.rows or any(len(row) != self.cols for row in table):
            raise ValueError("table does not match the matrix dimensions")
        self.table = table

    @classmethod
    def identity(cls, length, value=1.0):
        """A square matrix with ``value`` on the diagonal and zeros elsewhere."""
        matrix = cls(length, length)
        for i in range(length):
            matrix.table[i][i] = float(value)
        return matrix

    def __getitem__(self, pos):
        y, x = pos
        return self.table[y][x]

    def __setitem__(self, pos, value):
        y, x = pos
        self.table[y][x] = float(value)

    def row(self, n):
        """A copy of row ``n``."""
        return list(self.table[n])

    def column(self, n):
        """A copy of column ``n``."""
        return [row[n] for row in self.table]

    def _same_shape(self, other):
        return self.rows == other.rows and self.cols == other.cols

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if not self._same_shape(other):
            raise ValueError("cannot be summed")
        return Matrix(
            self.rows,
            self.cols,
            [
                [a + b for a, b in zip(row, other_row)]
                for row, other_row in zip(self.table, other.table)
            ],
        )

    def scaled(self, scalar):
        """Every entry multiplied by ``scalar``."""
        return Matrix(
            self.rows, self.cols, [[value * scalar for value in row] for row in self.table]
        )

    def product(self, other):
        """The matrix product ``self · other``."""
        if self.cols != other.rows:
            raise ValueError("Cannot be multiplied, incompatible dimensions")
        columns = [other.column(x) for x in range(other.cols)]
        return Matrix(
            self.rows,
            other.cols,
            [
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self.table
            ],
        )

    def suppressed(self, y, x):
        """The matrix without row ``y`` and column ``x``."""
        if self.rows < 2 and self.cols < 2:
            raise ValueError("Mat cannot be modified (insufficient size)")
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            raise IndexError("Mat cannot be modified (out of bounds)")
        table = [
            row[:x] + row[x + 1 :] for i, row in enumerate(self.table) if i != y
        ]
        return Matrix(self.rows - 1, self.cols - 1, table)

    def transpose(self):
        return Matrix(self.cols, self.rows, [list(column) for column in zip(*self.table)]
                      if self.rows else [[] for _ in range(self.cols)])

    def det2(self):
        """Determinant of a 2x2 matrix."""
        if self.rows != 2 or self.cols != 2:
            raise ValueError("Matrix is not 2x2")
        t = self.table
        return t[0][0] * t[1][1] - t[0][1] * t[1][0]

    def det3(self):
        """Determinant of a 3x3 matrix by the rule of Sarrus."""
        if self.rows != 3 or self.cols != 3:
            raise ValueError("Matrix is not 3x3")
        t = self.table
        return (
            t[0][0] * t[1][1] * t[2][2]
            + t[0][1] * t[1][2] * t[2][0]
            + t[0][2] * t[1][0] * t[2][1]
            - t[0][2] * t[1][1] * t[2][0]
            - t[0][0] * t[1][2] * t[2][1]
            - t[0][1] * t[1][0] * t[2][2]
        )

    def determinant(self):
        """Determinant by Laplace expansion along the first row."""
        if self.rows != self.cols:
            raise ValueError("Matrix is not square")
        if self.rows == 1:
            return self.table[0][0]
        if self.rows == 2:
            return self.det2()
        if self.rows == 3:
            return self.det3()
        return sum(
            self.table[0][i]
            * self.suppressed(0, i).determinant()
            * (1 if i % 2 == 0 else -1)
            for i in range(self.cols)
        )

    def inverse(self):
        """The matrix of minors: entry (i, j) is the determinant without row i and column j."""
        if self.rows != self.cols:
            raise ValueError("Matrix is not square")
        result = Matrix(self.cols, self.rows)
        for i in range(result.cols):
            for j in range(result.rows):
                result.table[i][j] = self.suppressed(i, j).determinant()
        return result

    def fill(self, value, y0=0, x0=0):
        """Set every entry from row ``y0`` and column ``x0`` onward to ``value``."""
        for row in self.table[y0:]:
            for x in range(x0, self.cols):
                row[x] = float(value)

    def __str__(self):
        lines = ["Mat:\n"]
        for row in self.table:
            lines.append("".join(f"{value:f}\t" for value in row) + "\n")
        return "".join(lines)