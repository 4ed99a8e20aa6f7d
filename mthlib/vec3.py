"""Three-component vector."""

from __future__ import annotations

import math
import operator
from collections.abc import Iterator


class Vec3:
    """A mutable 3D vector of floats."""

    __slots__ = ("_values",)

    def __init__(self, *args: float | Vec3) -> None:
        """Build from no arguments (zeros), one scalar or vector, or three components."""
        if not args:
            values: tuple = (0.0, 0.0, 0.0)
        elif len(args) == 1:
            (arg,) = args
            values = tuple(arg) if isinstance(arg, Vec3) else (arg, arg, arg)
        elif len(args) == 3:
            values = args
        else:
            raise TypeError(f"Vec3 takes 0, 1 or 3 arguments, got {len(args)}")
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

    def len(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def norm(self, new_len: float = 1) -> Vec3:
        """Return a vector in the same direction with length ``new_len``."""
        coef = new_len / self.len()
        return Vec3(self.x * coef, self.y * coef, self.z * coef)

    @staticmethod
    def _checked(index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < 3:
            raise IndexError("Vector3 size")
        return index

    def __getitem__(self, index: int) -> float:
        return self._values[self._checked(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._values[self._checked(index)] = float(value)

    def __iadd__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        self._values = [a + b for a, b in zip(self._values, other._values)]
        return self

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(a + b for a, b in zip(self._values, other._values)))

    def __mul__(self, coef: float) -> Vec3:
        if isinstance(coef, Vec3):
            return NotImplemented
        return Vec3(*(v * coef for v in self._values))

    def __rmul__(self, coef: float) -> Vec3:
        return self.__mul__(coef)

    def __iter__(self) -> Iterator[float]:
        return iter(tuple(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Vec3:
        """Return an independent copy."""
        return Vec3(*self._values)

    def __repr__(self) -> str:
        return f"Vec3({self.x!r}, {self.y!r}, {self.z!r})"