# mthlib

A small, dependency-free 3D math library. It provides vectors, 4×4
matrices, affine transforms, and a scene-graph style node that combines
transforms through a chain of parents.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Overview

| Module                   | Contents                                                          |
|--------------------------|-------------------------------------------------------------------|
| `mthlib.vec3`            | `Vec3`: three-component vector with length and normalisation      |
| `mthlib.vec4`            | `Vec4`: four-component vector                                     |
| `mthlib.mat4`            | `Mat4`: 4×4 row-major matrix, and `Row`, a view of one of its rows |
| `mthlib.transform3`      | `Transform3`: builds up translations, rotations and scales        |
| `mthlib.transformable3`  | `Transformable3`: a positioned, rotated and scaled node with a parent |

## Vectors

```python
from mthlib.vec3 import Vec3
from mthlib.vec4 import Vec4

v = Vec3(3, 0, 4)
v.len()            # 5.0
v.norm(1)          # Vec3 of length 1 pointing the same way
v.norm(10)         # same direction, length 10
2 * v              # Vec3(6.0, 0.0, 8.0); v * 2 gives the same
v + Vec3(1)        # new vector, component by component
v += Vec3(1)       # in place
v.x, v[1]          # components by name or by index

w = Vec4(8, 2, 3, 9)
w[0] = 67
list(w)            # [67.0, 2.0, 3.0, 9.0]
w2 = w.copy()      # independent copy
```

You can build a vector with no arguments (all zeros), with one number that
fills every component, with another vector of the same kind (a copy), or
with one value per component. Any other number of arguments raises
`TypeError`. Components are stored as floats and are named `x`, `y`, `z`
(and `w` on `Vec4`). An index outside the vector's components, negative
ones included, raises `IndexError`. Vectors of the same kind compare
equal when all their components are equal. Vectors cannot be hashed.
`norm` of a zero-length vector raises `ZeroDivisionError`.

## Matrices

```python
from mthlib.mat4 import Mat4

m = Mat4(9)          # every entry set to 9.0
m2 = m.copy()
m2[2][1] = 16        # m stays unchanged
product = m @ m2     # m * m2 gives the same product
m.values()           # the sixteen entries, row by row, as a new list
[list(row) for row in m]
```

A `Mat4` takes no arguments (all zeros), one fill value, another `Mat4`
(a copy), or sixteen values in row-major order. `m[i]` returns a `Row`
that reads and writes the matrix in place. Row and column indices must
lie in 0..3. Any other index raises `IndexError`. Matrices compare equal
entry by entry.

## Transforms

```python
import math
from mthlib.transform3 import Transform3
from mthlib.vec3 import Vec3

t = Transform3()                         # starts as the identity
t.translate(Vec3(1, 2, 3))
t.rotate(Vec3(0, 0, 1), math.pi / 2)     # axis, angle in radians
t.scale(Vec3(2))
t.matrix                                 # a copy of the combined Mat4
Transform3.identity()                    # the 4×4 identity matrix
Transform3(some_mat4)                    # start from a copy of a given matrix
```

Each operation multiplies the current matrix on the right, so the
operations apply to points in the reverse order of the calls. The rotation
axis is normalised before use.

## Scene nodes

```python
from mthlib.transformable3 import Transformable3
from mthlib.vec3 import Vec3

root = Transformable3()
child = Transformable3(root)

root.set_position(Vec3(10, 0, 0))
child.move(Vec3(0, 1, 0))
child.set_rotation(Vec3(0, 1, 0), 0.5)
child.scale(Vec3(1))          # adds to the current scale
child.set_scale(Vec3(2))

child.parent                  # root; assign to change it, or None to detach
child.local_transform()       # a Transform3 for this node alone
child.global_transform()      # parents' transforms times the local one
```

A node starts at the origin with scale `Vec3(1)` and a rotation of 0
radians about `Vec3(1, 0, 0)`. The setters store copies of the vectors you
pass. `move` and `scale` add to the current position and scale.

The local transform is computed only after a change, and only when it is
asked for. The node keeps a single `Transform3` for its whole life.
Each update applies translation, rotation and scale on top of the
transform it already holds, and does not start again from the identity.
After two updates with the same position, the node is translated twice.
`global_transform` multiplies the global transform of the parent by the
node's local transform, going up the chain to a node with no parent.

## What it does not do

mthlib is a library only. It has no command-line program. It does not
invert matrices, transform vectors by matrices, or provide projection or
camera matrices.