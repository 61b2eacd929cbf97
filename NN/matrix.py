from __future__ import annotations
from typing import Callable, Sequence, Union
import numpy as np

from .errors import MalformedInputError, ShapeMismatchError

Number = Union[int, float]
Table = Union["Matrix", np.ndarray, Sequence[Sequence[Number]]]


class Matrix:
    """Dense 2D matrix of floats.

    Every operation returns a new Matrix; operands are never mutated.

      Matrix(4, 3)              4 rows x 3 columns, zero-filled
      Matrix.from_rows(table)   wrap a rectangular table (copied)
      m.fill(x)                 fill with a value, or call a generator per cell
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int = 1, columns: int = 1):
        rows = max(1, int(rows))
        columns = max(1, int(columns))
        self._data = np.zeros((rows, columns), dtype=np.float64)

    # ---------- Constructors ----------
    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Matrix":
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def from_rows(cls, table: Table) -> "Matrix":
        if isinstance(table, Matrix):
            return table.copy()
        if isinstance(table, np.ndarray):
            if table.ndim != 2 or table.size == 0:
                raise MalformedInputError(f"expected a non-empty 2D array, got shape {table.shape}")
            if table.dtype.kind in "SU":
                raise MalformedInputError(f"expected a numeric array, got dtype {table.dtype}")
            try:
                return cls._wrap(np.array(table, dtype=np.float64))
            except (TypeError, ValueError) as exc:
                raise MalformedInputError(f"non-numeric matrix data: {exc}") from exc

        if isinstance(table, (str, bytes)):
            raise MalformedInputError("matrix data must be a table of rows, got a string")
        try:
            rows = []
            for r in table:
                if isinstance(r, (str, bytes)):
                    raise MalformedInputError(f"row {len(rows)} is a string, expected a sequence of numbers")
                row = list(r)
                if any(isinstance(c, (str, bytes)) for c in row):
                    raise MalformedInputError(f"row {len(rows)} holds strings, expected numbers")
                rows.append(row)
        except TypeError as exc:
            raise MalformedInputError("matrix data must be a table of rows") from exc
        if not rows or not rows[0]:
            raise MalformedInputError("matrix data must have at least one row and one column")
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise MalformedInputError(f"row {i} has {len(r)} entries, expected {width}")
        try:
            data = np.array(rows, dtype=np.float64)
        except (TypeError, ValueError) as exc:
            raise MalformedInputError(f"non-numeric matrix data: {exc}") from exc
        if data.ndim != 2:
            raise MalformedInputError(f"expected a 2D table of numbers, got shape {data.shape}")
        return cls._wrap(data)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls._wrap(np.eye(max(1, int(n)), dtype=np.float64))

    def copy(self) -> "Matrix":
        return Matrix._wrap(self._data.copy())

    # ---------- Shape / access ----------
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def size(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def __getitem__(self, idx: tuple[int, int]) -> float:
        r, c = idx
        return float(self._data[r, c])

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    # ---------- Initializers ----------
    def fill(self, value: Union[Number, Callable[[], float]]) -> "Matrix":
        """Same shape, every cell set to `value` or to a fresh `value()` call."""
        if callable(value):
            n = self._data.size
            cells = np.fromiter((value() for _ in range(n)), dtype=np.float64, count=n)
            return Matrix._wrap(cells.reshape(self._data.shape))
        return Matrix._wrap(np.full(self._data.shape, float(value), dtype=np.float64))

    def ones(self) -> "Matrix":
        return self.fill(1.0)

    def map(self, f: Callable[[float], float]) -> "Matrix":
        if isinstance(f, np.ufunc):
            return Matrix._wrap(np.asarray(f(self._data), dtype=np.float64))
        return Matrix._wrap(np.vectorize(f, otypes=[np.float64])(self._data))

    # ---------- Algebra ----------
    def _check_same_size(self, other: "Matrix", op: str) -> None:
        if self.size != other.size:
            raise ShapeMismatchError(f"can not {op} matrices of different sizes {self.size} and {other.size}")

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_size(other, "add")
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: "Matrix") -> "Matrix":
        self._check_same_size(other, "subtract")
        return Matrix._wrap(self._data - other._data)

    def scale(self, k: float) -> "Matrix":
        return Matrix._wrap(self._data * float(k))

    def divide(self, k: float) -> "Matrix":
        # IEEE semantics: x/0 -> +-inf, 0/0 -> nan
        with np.errstate(divide="ignore", invalid="ignore"):
            return Matrix._wrap(self._data / np.float64(k))

    def matmul(self, other: "Matrix") -> "Matrix":
        if self.columns != other.rows:
            raise ShapeMismatchError(
                f"columns and rows do not match up: {self.size} x {other.size}"
            )
        return Matrix._wrap(self._data @ other._data)

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    __add__ = add
    __sub__ = subtract
    __matmul__ = matmul

    def __mul__(self, k: float) -> "Matrix":
        if isinstance(k, Matrix):
            return NotImplemented
        return self.scale(k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Matrix":
        if isinstance(k, Matrix):
            return NotImplemented
        return self.divide(k)

    # ---------- Comparison ----------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self._data, other._data))

    def allclose(self, other: "Matrix", tol: float = 1e-9) -> bool:
        return self.size == other.size and bool(np.allclose(self._data, other._data, rtol=0.0, atol=tol))

    # ---------- Display ----------
    def to_display_string(self) -> str:
        return "\n".join(
            "[" + ", ".join(f"{elem}" for elem in row) + "]" for row in self._data.tolist()
        )

    def __str__(self) -> str:
        return f"matrix {self.rows}x{self.columns}\n{self.to_display_string()}"

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r})"
