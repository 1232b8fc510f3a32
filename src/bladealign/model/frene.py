"""
Frene (Local Frame) Builders
============================
Two ways of building an orthonormal tangent/binormal/normal triad at a
point of a measured curve:

* by polynomial: a parabola through the point and its two neighbours in the
  same family gives the tangent, a neighbour from the second family gives
  the surface direction that closes the normal;
* by circular arc: the curve is assumed locally circular about a known
  center, so the radial direction is the normal and no fit is needed.

The last axis of each triad is a cross product of the first two, so the
result is orthonormal and right-handed (t x b = n).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence
import logging

import numpy as np

from bladealign.model.fitting import poly
from bladealign.model.geometry_primitives import Frene
from bladealign.model.geometry_utils import as_point, unit_vector, forward_tangent

if TYPE_CHECKING:
    import numpy.typing as npt

    PointLike = Sequence[float] | npt.NDArray[np.float64]

logger = logging.getLogger(__name__)


def get_frene_by_poly(p0: PointLike, u1: PointLike, u2: PointLike, v1: PointLike) -> Frene:
    """
    Frene frame at `p0` from a local quadratic fit of the curve in the XY plane.

    Args:
        p0: Point on the curve the frame is anchored at.
        u1: Neighbour of `p0` on the same curve (one side).
        u2: Neighbour of `p0` on the same curve (other side).
        v1: Neighbour of `p0` on the adjacent curve.

    Raises:
        DegenerateInputError: If u1, p0, u2 share an x-coordinate, or if
            v1 - p0 is zero or parallel to the curve tangent.

    Returns:
        The Frene frame with tangent along the curve (forward in x).
    """
    p0, u1, u2, v1 = as_point(p0), as_point(u1), as_point(u2), as_point(v1)

    # Fit in x measured from p0, so the slope at p0 is the linear coefficient
    a0, a1, _ = poly(u1[0] - p0[0], 0.0, u2[0] - p0[0], u1[1], p0[1], u2[1])
    tan_u = forward_tangent(unit_vector(np.array([1.0, a1, 0.0])))
    tan_v = unit_vector(v1 - p0)

    n = unit_vector(np.cross(tan_u, tan_v))
    b = unit_vector(np.cross(n, tan_u))

    frene = Frene(t=tan_u, b=b, n=n, p=p0)
    logger.debug(f"Frene by polynomial at {p0}: curvature coefficient {a0:.6g}, slope {a1:.6g}")
    return frene


def get_frene_by_circ(pt0: PointLike, center: PointLike) -> Frene:
    """
    Frene frame at `pt0` assuming the curve is a circular arc about `center`.

    The normal is the radial direction pt0 - center, the tangent its
    perpendicular in the XY plane (forward in x) and the binormal n x t.

    Raises:
        DegenerateInputError: If `pt0` coincides with `center`, or the radial
            direction is parallel to z (no in-plane perpendicular).
    """
    pt0, center = as_point(pt0), as_point(center)

    n = unit_vector(pt0 - center)
    t = forward_tangent(unit_vector(np.array([-n[1], n[0], 0.0])))
    b = unit_vector(np.cross(n, t))

    frene = Frene(t=t, b=b, n=n, p=pt0)
    logger.debug(f"Frene by circular arc at {pt0} about {center}")
    return frene
