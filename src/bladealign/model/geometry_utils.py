"""
Small vector helpers and the sign conventions used to build frames.

The sign conventions are kept here, in one place, so that every builder
applies the same rule:

* forward tangent: a tangent whose x-component is negative is flipped.
* upward normal: the implicit plane normal derived from a height field
  always has a positive z-component.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from math import sqrt, pi
import logging
import numpy as np

from bladealign.config import ZERO_LENGTH_EPS
from bladealign.model.errors import DegenerateInputError

if TYPE_CHECKING:
    from numpy import typing as npt

logger = logging.getLogger(__name__)

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def rad2deg(radians: float) -> float:
    return radians * 180 / pi


def as_point(value: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Convert a 3-component sequence into a fresh float array.

    Raises:
        ValueError: If the value does not have exactly three components.
    """
    arr = np.array(value, dtype=np.float64).reshape(-1)
    if arr.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {arr.shape}.")
    return arr


def unit_vector(vector: npt.NDArray[np.float64], eps: float = ZERO_LENGTH_EPS) -> npt.NDArray[np.float64]:
    """
    Return `vector` scaled to unit length.

    Args:
        vector: The vector to normalize.
        eps: Shortest length that can still be normalized.

    Raises:
        DegenerateInputError: If the vector length is at or below `eps`.
    """
    vector = np.asarray(vector, dtype=np.float64)
    length = float(np.linalg.norm(vector))
    if length <= eps:
        logger.warning(f"Cannot normalize vector {vector} of length {length:.3e}.")
        raise DegenerateInputError(f"Cannot normalize a zero-length vector: {vector}.")
    return vector / length


def wrap_angle(angle: float, in_degrees: bool = True) -> float:
    """Wrap an angle into the half-open interval (-180, 180] (or (-pi, pi])."""
    half_turn = 180.0 if in_degrees else pi
    wrapped = (angle + half_turn) % (2.0 * half_turn) - half_turn
    if wrapped <= -half_turn:
        wrapped += 2.0 * half_turn
    return wrapped


def forward_tangent(tangent: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Flip `tangent` when its x-component is negative (forward convention)."""
    return -tangent if tangent[0] < 0.0 else tangent


def upward_normal_from_height_field(aa: float, bb: float, dd: float) -> tuple[float, float, float, float]:
    """
    Derive the implicit plane A*x + B*y + C*z + D = 0 from z = aa*x + bb*y + dd.

    The normal (A, B, C) has unit length and C > 0, whatever the order of the
    points the height field was fitted to.

    Returns:
        The coefficients (A, B, C, D).
    """
    c = sqrt(1.0 / (aa * aa + bb * bb + 1.0))
    return -aa * c, -bb * c, c, -dd * c


def in_plane_axes(normal: npt.NDArray[np.float64], helper_limit: float) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Choose a tangent and a binormal lying in the plane orthogonal to `normal`.

    The global X axis is projected onto the plane unless the normal is within
    reach of X (|n.x| >= `helper_limit`), in which case global Y is used. The
    projected helper is normalized and negated to give the tangent; the
    binormal is n x t, and the tangent is then rebuilt as b x n so that
    [t, b, n] is orthonormal and right-handed to machine precision.

    Args:
        normal: Unit normal of the plane.
        helper_limit: Threshold on |n.x| for switching to the Y helper.

    Returns:
        The tangent and binormal.
    """
    helper = X_AXIS if abs(normal[0]) < helper_limit else Y_AXIS
    t = -unit_vector(helper - np.dot(helper, normal) * normal)
    b = unit_vector(np.cross(normal, t))
    t = np.cross(b, normal)
    return t, b
