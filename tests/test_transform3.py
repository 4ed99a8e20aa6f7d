import math

import pytest

from mthlib.mat4 import Mat4
from mthlib.transform3 import Transform3
from mthlib.vec3 import Vec3


def _transpose(mat):
    rows = [list(row) for row in mat]
    return Mat4(*(rows[j][i] for i in range(4) for j in range(4)))


def _assert_close(a, b):
    assert a.values() == pytest.approx(b.values(), abs=1e-6)


def test_identity_layout():
    ident = Transform3.identity()
    for i, row in enumerate(ident):
        for j, value in enumerate(row):
            assert value == (1 if i == j else 0)


def test_default_is_identity():
    assert Transform3().matrix == Transform3.identity()


def test_constructor_copies_matrix():
    mat = Mat4(*range(16))
    t = Transform3(mat)
    mat[0][0] = 100
    assert t.matrix == Mat4(*range(16))


def test_matrix_property_returns_copy():
    t = Transform3()
    m = t.matrix
    m[0][0] = 5
    assert t.matrix == Transform3.identity()


def test_translate_sets_last_column():
    vec = Vec3(1.5, -2.0, 3.0)
    t = Transform3()
    t.translate(vec)
    m = t.matrix
    assert [m[i][3] for i in range(3)] == list(vec)
    assert [[m[i][j] for j in range(3)] for i in range(3)] == [
        [1, 0, 0], [0, 1, 0], [0, 0, 1]
    ]


def test_translations_compose_additively():
    a, b = Vec3(1, 2, 3), Vec3(-4, 0.5, 2)
    t1 = Transform3()
    t1.translate(a)
    t1.translate(b)
    t2 = Transform3()
    t2.translate(a + b)
    _assert_close(t1.matrix, t2.matrix)


def test_scale_sets_diagonal():
    vec = Vec3(2.0, 3.0, 0.5)
    t = Transform3()
    t.scale(vec)
    m = t.matrix
    assert [m[i][i] for i in range(4)] == [2.0, 3.0, 0.5, 1.0]


def test_zero_angle_rotation_is_identity():
    t = Transform3()
    t.rotate(Vec3(1, 0, 0), 0)
    assert t.matrix == Transform3.identity()


def test_rotation_then_inverse_is_identity():
    axis = Vec3(1, 2, -1)
    t = Transform3()
    t.rotate(axis, 0.7)
    t.rotate(axis, -0.7)
    _assert_close(t.matrix, Transform3.identity())


def test_full_turn_is_identity():
    t = Transform3()
    t.rotate(Vec3(0.3, -1, 2), 2 * math.pi)
    _assert_close(t.matrix, Transform3.identity())


def test_rotation_is_orthogonal():
    t = Transform3()
    t.rotate(Vec3(2, -1, 0.5), 1.1)
    m = t.matrix
    _assert_close(m @ _transpose(m), Transform3.identity())


def test_axis_length_does_not_matter():
    t1 = Transform3()
    t1.rotate(Vec3(0, 0, 5), 0.4)
    t2 = Transform3()
    t2.rotate(Vec3(0, 0, 1), 0.4)
    _assert_close(t1.matrix, t2.matrix)


def test_quarter_turn_about_z():
    t = Transform3()
    t.rotate(Vec3(0, 0, 1), math.pi / 2)
    m = t.matrix
    assert m[0][1] == pytest.approx(1.0)
    assert m[1][0] == pytest.approx(-1.0)
    assert m[2][2] == pytest.approx(1.0)


def test_zero_axis_fails():
    with pytest.raises(ZeroDivisionError):
        Transform3().rotate(Vec3(), 1.0)