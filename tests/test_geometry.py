import pytest

from gaussmarkov.geometry import Box, Vector


def test_vector_addition_is_componentwise():
    total = Vector(1.0, 2.0, 3.0) + Vector(0.5, -2.0, 4.0)
    assert total == Vector(1.5, 0.0, 7.0)


def test_vector_addition_with_other_type_fails():
    with pytest.raises(TypeError):
        Vector(1.0, 2.0, 3.0) + 1.0


def test_scaled_by_one_is_identity():
    v = Vector(3.0, -4.0, 5.0)
    assert v.scaled(1.0) == v


def test_scaled_by_zero_is_origin():
    assert Vector(3.0, -4.0, 5.0).scaled(0.0) == Vector()


def test_scaled_negates():
    v = Vector(3.0, -4.0, 5.0)
    assert v.scaled(-1.0) + v == Vector()


def test_default_box_matches_model_default_bounds():
    box = Box()
    assert (box.x_min, box.x_max, box.y_min, box.y_max, box.z_min, box.z_max) == (
        -100.0,
        100.0,
        -100.0,
        100.0,
        0.0,
        100.0,
    )


def test_is_inside_includes_faces():
    box = Box(890.0, 990.0, 840.0, 870.0, 0.0, 6.0)
    assert box.is_inside(Vector(890.0, 840.0, 0.0))
    assert box.is_inside(Vector(990.0, 870.0, 6.0))
    assert box.is_inside(Vector(934.0, 852.0, 1.5))


def test_is_inside_rejects_outside_points():
    box = Box(890.0, 990.0, 840.0, 870.0, 0.0, 6.0)
    assert not box.is_inside(Vector(484.0, 298.0, 1.5))
    assert not box.is_inside(Vector(934.0, 852.0, 20.0))
    assert not box.is_inside(Vector(1000.0, 850.0, 1.5))