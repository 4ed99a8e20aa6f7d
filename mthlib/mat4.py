"""4x4 row-major matrix."""

from __future__ import annotations

import operator
from collections.abc import Iterator


def _checked(index: int, size: int, message: str) -> int:
    index = operator.index(index)
    if not 0 <= index < size:
        raise IndexError(message)
    return index


class Row:
    """A writable view of one row of a matrix."""

    __slots__ = ("_values", "_offset")

    def __init__(self, values: list[float], offset: int) -> None:
        self._values = values
        self._offset = offset

    def __getitem__(self, index: int) -> float:
        return self._values[self._offset + _checked(index, 4, "Mat4 Row index")]

    def __setitem__(self, index: int, value: float) -> None:
        self._values[self._offset + _checked(index, 4, "Mat4 Row index")] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values[self._offset : self._offset + 4])

    def __repr__(self) -> str:
        return f"Row({list(self)!r})"


class Mat4:
    """A mutable 4x4 matrix of floats stored row by row."""

    __slots__ = ("_values",)

    def __init__(self, *args: float | Mat4) -> None:
        """Build from no arguments (zeros), one scalar or matrix, or sixteen values."""
        if not args:
            values: tuple = (0.0,) * 16
        elif len(args) == 1:
            (arg,) = args
            values = tuple(arg._values) if isinstance(arg, Mat4) else (arg,) * 16
        elif len(args) == 16:
            values = args
        else:
            raise TypeError(f"Mat4 takes 0, 1 or 16 arguments, got {len(args)}")
        self._values = [float(v) for v in values]

    def values(self) -> list[float]:
        """All sixteen values, row by row."""
        return list(self._values)

    def __getitem__(self, index: int) -> Row:
        return Row(self._values, 4 * _checked(index, 4, "Mat4 index"))

    def __iter__(self) -> Iterator[Row]:
        return (Row(self._values, 4 * i) for i in range(4))

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        a, b = self._values, other._values
        return Mat4(
            *(
                sum(a[4 * i + k] * b[4 * k + j] for k in range(4))
                for i in range(4)
                for j in range(4)
            )
        )

    def __mul__(self, other: Mat4) -> Mat4:
        return self.__matmul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Mat4:
        """Return an independent copy."""
        return Mat4(*self._values)

    def __repr__(self) -> str:
        rows = ", ".join(repr(list(row)) for row in self)
        return f"Mat4({rows})"