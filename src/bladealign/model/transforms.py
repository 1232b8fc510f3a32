"""
Homogeneous Transform Primitives
================================
Translation and axis rotation matrices in 4x4 homogeneous form, and the
Euler angle encode/decode pair.

Euler convention used throughout the package:

    R = Rz(A) @ Ry(B) @ Rx(C)

with A the yaw (about z), B the pitch (about y) and C the roll (about x).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from math import atan2, asin, cos, sin, sqrt, pi
from typing import TYPE_CHECKING, Sequence
import logging

import numpy as np

from bladealign.config import ROTATION_SNAP_EPS, GIMBAL_LOCK_EPS
from bladealign.model.geometry_utils import as_point, deg2rad, rad2deg, wrap_angle

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Axis(StrEnum):
    X = "x"
    Y = "y"
    Z = "z"


@dataclass(frozen=True)
class EulerSolution:
    """
    Both (yaw, pitch, roll) decompositions of a rotation matrix.

    Index 1 is the primary branch (pitch within [-90, 90]), index 2 the
    alternate one. Which branch to use is up to the caller.
    """
    a1: float
    a2: float
    b1: float
    b2: float
    c1: float
    c2: float
    in_degrees: bool = False

    @property
    def primary(self) -> tuple[float, float, float]:
        return self.a1, self.b1, self.c1

    @property
    def alternate(self) -> tuple[float, float, float]:
        return self.a2, self.b2, self.c2


def translation_matrix(delta: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Identity with the translation column set to `delta`."""
    T = np.eye(4)
    T[:3, 3] = as_point(delta)
    return T


def axis_rotation_matrix(angle_deg: float, axis: Axis | str) -> npt.NDArray[np.float64]:
    """
    Right-handed rotation about a principal axis, embedded in a 4x4 matrix.

    Entries whose absolute value is at or below ROTATION_SNAP_EPS are set to
    exactly 0, so that 90/180 degree rotations come out exact. This is lossy:
    a rotation of a few thousandths of a degree off an axis-aligned angle
    loses its small components.

    Args:
        angle_deg: Rotation angle in degrees.
        axis: 'x', 'y' or 'z'.

    Raises:
        ValueError: If `axis` is not one of 'x', 'y', 'z'.

    Returns:
        A (4, 4) homogeneous rotation matrix.
    """
    axis = Axis(axis)
    ang = deg2rad(angle_deg)
    c, s = cos(ang), sin(ang)

    R = np.eye(4)
    match axis:
        case Axis.X:
            R[1, 1], R[1, 2], R[2, 1], R[2, 2] = c, -s, s, c
        case Axis.Y:
            R[0, 0], R[0, 2], R[2, 0], R[2, 2] = c, s, -s, c
        case Axis.Z:
            R[0, 0], R[0, 1], R[1, 0], R[1, 1] = c, -s, s, c

    R[np.abs(R) <= ROTATION_SNAP_EPS] = 0.0
    return R


def euler_compose(A: float, B: float, C: float, in_degrees: bool = False) -> npt.NDArray[np.float64]:
    """
    Build the rotation Rz(A) @ Ry(B) @ Rx(C).

    Args:
        A: Yaw.
        B: Pitch.
        C: Roll.
        in_degrees: Whether the angles are given in degrees (radians otherwise).

    Returns:
        A (3, 3) rotation matrix.
    """
    if in_degrees:
        A, B, C = deg2rad(A), deg2rad(B), deg2rad(C)

    ca, sa = cos(A), sin(A)
    cb, sb = cos(B), sin(B)
    cc, sc = cos(C), sin(C)

    return np.array([
        [ca * cb, ca * sb * sc - sa * cc, ca * sb * cc + sa * sc],
        [sa * cb, sa * sb * sc + ca * cc, sa * sb * cc - ca * sc],
        [-sb,     cb * sc,                cb * cc],
    ])


def euler_decompose(R: npt.NDArray[np.float64], in_degrees: bool = False) -> EulerSolution:
    """
    Extract yaw/pitch/roll from a rotation matrix.

    The primary branch is A1 = atan2(R10, R00), B1 = asin(-R20),
    C1 = atan2(R21, R22). The alternate is A1 + 180, 180 - B1, C1 + 180.
    All angles are wrapped into (-180, 180] (or (-pi, pi]).

    At gimbal lock (|cos(B)| below GIMBAL_LOCK_EPS) only A - C (pitch +90)
    or A + C (pitch -90) is defined; yaw is then fixed to 0 and the whole
    rotation is carried by the roll.

    Args:
        R: (3, 3) rotation matrix. The upper-left block of a (4, 4) matrix is
           accepted as well.
        in_degrees: Return angles in degrees instead of radians.

    Returns:
        The two decompositions.
    """
    R = np.asarray(R, dtype=np.float64)[:3, :3]

    sin_b = float(np.clip(-R[2, 0], -1.0, 1.0))
    cos_b = sqrt(R[0, 0] ** 2 + R[1, 0] ** 2)

    if cos_b < GIMBAL_LOCK_EPS:
        logger.debug(f"Gimbal lock in Euler decomposition (cos(pitch) = {cos_b:.3e}).")
        a1 = 0.0
        b1 = pi / 2 if sin_b > 0.0 else -pi / 2
        c1 = atan2(sin_b * R[0, 1], R[1, 1])
    else:
        a1 = atan2(R[1, 0], R[0, 0])
        b1 = asin(sin_b)
        c1 = atan2(R[2, 1], R[2, 2])

    a2 = a1 + pi
    b2 = pi - b1
    c2 = c1 + pi

    angles = [a1, a2, b1, b2, c1, c2]
    if in_degrees:
        angles = [rad2deg(angle) for angle in angles]
    a1, a2, b1, b2, c1, c2 = [wrap_angle(angle, in_degrees) for angle in angles]

    return EulerSolution(a1=a1, a2=a2, b1=b1, b2=b2, c1=c1, c2=c2, in_degrees=in_degrees)
