import pytest

from mthlib.vec4 import Vec4


def test_default_is_zero():
    assert list(Vec4()) == [0, 0, 0, 0]


def test_scalar_fills_all_components():
    assert list(Vec4(7)) == [7, 7, 7, 7]


def test_components():
    v3 = Vec4(8, 2, 3, 9)
    assert list(v3) == [8, 2, 3, 9]
    assert (v3.x, v3.y, v3.z, v3.w) == (8, 2, 3, 9)


def test_copy_is_independent():
    v3 = Vec4(8, 2, 3, 9)
    v4 = v3.copy()
    assert list(v4) == [8, 2, 3, 9]
    v4.x = 67
    assert v4.x == 67
    assert v3.x == 8


def test_copy_constructor():
    v3 = Vec4(8, 2, 3, 9)
    v4 = Vec4(v3)
    v4[0] = 67
    assert v4 == Vec4(67, 2, 3, 9)
    assert v3 == Vec4(8, 2, 3, 9)


@pytest.mark.parametrize("index", [4, 5, -1])
def test_index_out_of_range(index):
    v = Vec4(1, 2, 3, 4)
    with pytest.raises(IndexError):
        v[index]
    with pytest.raises(IndexError):
        v[index] = 0
    assert list(v) == [1, 2, 3, 4]


def test_wrong_argument_count():
    with pytest.raises(TypeError):
        Vec4(1, 2, 3)


def test_setitem_updates_w():
    v = Vec4()
    v[3] = 5
    assert v.w == 5