from math import pi

import numpy as np
import pytest

from bladealign.model.errors import DegenerateInputError
from bladealign.model.geometry_utils import (
    as_point,
    forward_tangent,
    in_plane_axes,
    unit_vector,
    upward_normal_from_height_field,
    wrap_angle,
)


class TestConventions:

    def test_forward_tangent_flips_backward_vectors(self):
        assert np.array_equal(forward_tangent(np.array([-0.6, 0.8, 0.0])), [0.6, -0.8, 0.0])
        assert np.array_equal(forward_tangent(np.array([0.6, 0.8, 0.0])), [0.6, 0.8, 0.0])

    def test_upward_normal(self):
        a, b, c, d = upward_normal_from_height_field(2.0, -3.0, 5.0)
        assert c > 0.0
        assert a * a + b * b + c * c == pytest.approx(1.0)
        assert a == pytest.approx(-2.0 * c)
        assert b == pytest.approx(3.0 * c)
        assert d == pytest.approx(-5.0 * c)

    def test_horizontal_height_field(self):
        a, b, c, d = upward_normal_from_height_field(0.0, 0.0, 2.0)
        assert (abs(a), abs(b), c, d) == (0.0, 0.0, 1.0, -2.0)


class TestVectors:

    def test_unit_vector(self):
        assert np.allclose(unit_vector(np.array([3.0, 4.0, 0.0])), [0.6, 0.8, 0.0])

    def test_zero_vector_cannot_be_normalized(self):
        with pytest.raises(DegenerateInputError):
            unit_vector(np.zeros(3))
        # still a ValueError for callers that only know the builtin
        with pytest.raises(ValueError):
            unit_vector(np.array([0.0, 1e-15, 0.0]))

    def test_as_point_copies(self):
        source = np.array([1.0, 2.0, 3.0])
        point = as_point(source)
        point[0] = 10.0
        assert source[0] == 1.0

    def test_as_point_shape(self):
        with pytest.raises(ValueError):
            as_point([1.0, 2.0, 3.0, 4.0])

    @pytest.mark.parametrize("normal", [
        [0.0, 0.0, 1.0],
        [0.95, 0.0, 0.3122498999],
        [1.0, 0.0, 0.0],
        [0.3, -0.4, 0.8660254038],
    ])
    def test_in_plane_axes(self, normal):
        n = unit_vector(np.array(normal))
        t, b = in_plane_axes(n, 0.9)
        axes = np.column_stack([t, b, n])
        assert np.allclose(axes.T @ axes, np.eye(3), atol=1e-12)
        assert np.linalg.det(axes) == pytest.approx(1.0)


class TestWrapAngle:

    @pytest.mark.parametrize("angle, expected", [
        (0.0, 0.0),
        (190.0, -170.0),
        (-180.0, 180.0),
        (180.0, 180.0),
        (540.0, 180.0),
        (-190.0, 170.0),
    ])
    def test_degrees(self, angle, expected):
        assert wrap_angle(angle) == pytest.approx(expected)

    def test_radians(self):
        assert wrap_angle(1.5 * pi, in_degrees=False) == pytest.approx(-0.5 * pi)
        assert wrap_angle(-pi, in_degrees=False) == pytest.approx(pi)
