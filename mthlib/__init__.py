"""Vectors, 4x4 matrices and hierarchical 3D transforms."""

__version__ = "0.1.0"
__all__ = ["vec3", "vec4", "mat4", "transform3", "transformable3"]