"""Affine 3D transform held as a 4x4 matrix."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .mat4 import Mat4
from .vec3 import Vec3

_IDENTITY3 = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


def _affine(linear: Iterable[Sequence[float]], offset: Iterable[float] = (0, 0, 0)) -> Mat4:
    """Build a 4x4 matrix from a 3x3 linear part and a translation column."""
    values: list[float] = []
    for row, shift in zip(linear, offset):
        values.extend((*row, shift))
    values.extend((0, 0, 0, 1))
    return Mat4(*values)


class Transform3:
    """A transform built up by right-multiplying translation, scale and rotation."""

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Mat4 | None = None) -> None:
        self._matrix = Transform3.identity() if matrix is None else matrix.copy()

    def translate(self, vec: Vec3) -> None:
        """Append a translation by ``vec``."""
        self._matrix = self._matrix @ _affine(_IDENTITY3, vec)

    def scale(self, vec: Vec3) -> None:
        """Append a per-axis scale by ``vec``."""
        factors = list(vec)
        diagonal = [
            [factors[i] if i == j else 0 for j in range(3)] for i in range(3)
        ]
        self._matrix = self._matrix @ _affine(diagonal)

    def rotate(self, vec: Vec3, angle: float) -> None:
        """Append a rotation of ``angle`` radians about the axis ``vec``."""
        s = math.sin(angle)
        c = math.cos(angle)
        axis = list(vec.norm(1))
        scaled = list((1 - c) * Vec3(*axis))
        ax, ay, az = axis
        skew = ((0, az, -ay), (-az, 0, ax), (ay, -ax, 0))

        linear = [
            [
                scaled[i] * axis[j] + (c if i == j else s * skew[i][j])
                for j in range(3)
            ]
            for i in range(3)
        ]
        self._matrix = self._matrix @ _affine(linear)

    @property
    def matrix(self) -> Mat4:
        """A copy of the transform's matrix."""
        return self._matrix.copy()

    @staticmethod
    def identity() -> Mat4:
        """The 4x4 identity matrix."""
        return _affine(_IDENTITY3)

    def __repr__(self) -> str:
        return f"Transform3({self._matrix!r})"