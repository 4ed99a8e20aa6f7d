"""Four-component vector."""

from __future__ import annotations

import operator
from collections.abc import Iterator


class Vec4:
    """A mutable 4D vector of floats."""

    __slots__ = ("_values",)

    def __init__(self, *args: float | Vec4) -> None:
        """Build from no arguments (zeros), one scalar or vector, or four components."""
        if not args:
            values: tuple = (0.0, 0.0, 0.0, 0.0)
        elif len(args) == 1:
            (arg,) = args
            values = tuple(arg) if isinstance(arg, Vec4) else (arg,) * 4
        elif len(args) == 4:
            values = args
        else:
            raise TypeError(f"Vec4 takes 0, 1 or 4 arguments, got {len(args)}")
        self._values = [float(v) for v in values]

    @property
    def x(self) -> float:
        return self._values[0]

    @x.setter
    def x(self, value: float) -> None:
        self._values[0] = float(value)

    @property
    def y(self) -> float:
        return self._values[1]

    @y.setter
    def y(self, value: float) -> None:
        self._values[1] = float(value)

    @property
    def z(self) -> float:
        return self._values[2]

    @z.setter
    def z(self, value: float) -> None:
        self._values[2] = float(value)

    @property
    def w(self) -> float:
        return self._values[3]

    @w.setter
    def w(self, value: float) -> None:
        self._values[3] = float(value)

    @staticmethod
    def _checked(index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < 4:
            raise IndexError("Vector4 size")
        return index

    def __getitem__(self, index: int) -> float:
        return self._values[self._checked(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._values[self._checked(index)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(tuple(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec4):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Vec4:
        """Return an independent copy."""
        return Vec4(*self._values)

    def __repr__(self) -> str:
        return f"Vec4({self.x!r}, {self.y!r}, {self.z!r}, {self.w!r})"