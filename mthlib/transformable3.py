"""Object with position, scale and rotation, optionally attached to a parent."""

from __future__ import annotations

from .transform3 import Transform3
from .vec3 import Vec3


class Transformable3:
    """Holds position, scale and rotation and builds a transform from them.

    The transform is rebuilt lazily, and each rebuild is appended to the
    transform already held.
    """

    def __init__(self, parent: Transformable3 | None = None) -> None:
        self._parent = parent
        self._position = Vec3()
        self._scale = Vec3(1)
        self._rot_vec = Vec3(1, 0, 0)
        self._rot_angle = 0.0
        self._transform = Transform3()
        self._needs_update = True

    def move(self, offset: Vec3) -> None:
        """Shift the position by ``offset``."""
        self._position += offset
        self._needs_update = True

    def scale(self, scale_v: Vec3) -> None:
        """Add ``scale_v`` to the current scale."""
        self._scale += scale_v
        self._needs_update = True

    def set_position(self, new_position: Vec3) -> None:
        self._position = new_position.copy()
        self._needs_update = True

    def set_scale(self, new_scale: Vec3) -> None:
        self._scale = new_scale.copy()
        self._needs_update = True

    def set_rotation(self, new_rot_vec: Vec3, new_rot_angle: float) -> None:
        """Set the rotation axis and angle in radians."""
        self._rot_vec = new_rot_vec.copy()
        self._rot_angle = float(new_rot_angle)
        self._needs_update = True

    @property
    def parent(self) -> Transformable3 | None:
        return self._parent

    @parent.setter
    def parent(self, parent: Transformable3 | None) -> None:
        self._parent = parent

    def local_transform(self) -> Transform3:
        """The transform of this object alone."""
        if self._needs_update:
            self._transform.translate(self._position)
            self._transform.rotate(self._rot_vec, self._rot_angle)
            self._transform.scale(self._scale)
            self._needs_update = False
        return Transform3(self._transform.matrix)

    def global_transform(self) -> Transform3:
        """The transform combined with those of all parents."""
        if self._parent is None:
            return self.local_transform()
        return Transform3(
            self._parent.global_transform().matrix @ self.local_transform().matrix
        )