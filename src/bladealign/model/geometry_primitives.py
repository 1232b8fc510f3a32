"""
Geometric Primitives
====================
Value types produced by the geometry engine.

Every type that carries a redundant representation (Plane: implicit and
height-field form, Frame: 6-vector and 4x4 transform, Frene: axes and 4x4
transform) derives the second representation from the first at
construction, so the two can never disagree.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence

import numpy as np

from bladealign.config import HELPER_AXIS_LIMIT
from bladealign.model.geometry_utils import as_point, unit_vector, in_plane_axes, upward_normal_from_height_field
from bladealign.model.transforms import euler_decompose

if TYPE_CHECKING:
    import numpy.typing as npt


def _axes_to_transform(
    t: npt.NDArray[np.float64],
    b: npt.NDArray[np.float64],
    n: npt.NDArray[np.float64],
    p: npt.NDArray[np.float64]
) -> npt.NDArray[np.float64]:
    """4x4 homogeneous transform with columns [t, b, n, p]."""
    T = np.eye(4)
    T[:3, 0] = t
    T[:3, 1] = b
    T[:3, 2] = n
    T[:3, 3] = p
    return T


def _read_only(arr: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class Plane:
    """
    A plane in both implicit and height-field form.

    Implicit:      a*x + b*y + c*z + d = 0, with (a, b, c) a unit normal, c > 0
    Height field:  z = aa*x + bb*y + dd

    Use `Plane.from_height_field` to create one.
    """
    a: float
    b: float
    c: float
    d: float
    aa: float
    bb: float
    dd: float

    @classmethod
    def from_height_field(cls, aa: float, bb: float, dd: float) -> Plane:
        a, b, c, d = upward_normal_from_height_field(aa, bb, dd)
        return cls(a=a, b=b, c=c, d=d, aa=float(aa), bb=float(bb), dd=float(dd))

    @property
    def normal(self) -> npt.NDArray[np.float64]:
        """Unit normal (a, b, c)."""
        return np.array([self.a, self.b, self.c])

    def z_at(self, x: float, y: float) -> float:
        """Height of the plane above (x, y)."""
        return self.aa * x + self.bb * y + self.dd

    def signed_distance(self, point: Sequence[float] | npt.NDArray[np.float64]) -> float:
        """Signed distance of `point` from the plane, positive on the normal side."""
        return float(self.normal @ as_point(point) + self.d)


@dataclass(frozen=True, eq=False)
class Frame:
    """
    A rigid pose, as a 4x4 homogeneous transform and as the human readable
    vector [x, y, z, yaw, pitch, roll] (angles in degrees).

    Only the transform is passed in; the vector is decoded from it (the
    translation column and the primary Euler branch of the rotation block).
    """
    transform: npt.NDArray[np.float64]
    vector: npt.NDArray[np.float64] = field(init=False)

    def __post_init__(self) -> None:
        transform = np.array(self.transform, dtype=np.float64)
        if transform.shape != (4, 4):
            raise ValueError(f"Expected shape (4, 4), got {transform.shape}.")

        euler = euler_decompose(transform[:3, :3], in_degrees=True)
        vector = np.concatenate([transform[:3, 3], euler.primary])

        object.__setattr__(self, "transform", _read_only(transform))
        object.__setattr__(self, "vector", _read_only(vector))

    @classmethod
    def from_axes(
        cls,
        origin: Sequence[float] | npt.NDArray[np.float64],
        t: npt.NDArray[np.float64],
        b: npt.NDArray[np.float64],
        n: npt.NDArray[np.float64]
    ) -> Frame:
        """Frame whose local x, y, z axes are t, b, n, located at `origin`."""
        return cls(_axes_to_transform(t, b, n, as_point(origin)))

    @property
    def position(self) -> npt.NDArray[np.float64]:
        return self.vector[:3].copy()

    @property
    def yaw(self) -> float:
        return float(self.vector[3])

    @property
    def pitch(self) -> float:
        return float(self.vector[4])

    @property
    def roll(self) -> float:
        return float(self.vector[5])

    def compose(self, other: Frame | npt.NDArray[np.float64]) -> Frame:
        """The pose `self @ other`; `other` may be a Frame or a 4x4 matrix."""
        other_transform = other.transform if isinstance(other, Frame) else np.asarray(other, dtype=np.float64)
        return Frame(self.transform @ other_transform)

    def inverse(self) -> Frame:
        """The inverse rigid transform (R^T, -R^T p)."""
        R = self.transform[:3, :3]
        p = self.transform[:3, 3]
        T = np.eye(4)
        T[:3, :3] = R.T
        T[:3, 3] = -R.T @ p
        return Frame(T)


@dataclass(frozen=True, eq=False)
class Frene:
    """
    Local orthonormal frame at a curve point.

    Attributes:
        t: Unit tangent.
        b: Unit binormal.
        n: Unit normal.
        p: Anchor point on the curve.
        transform: 4x4 transform with columns [t, b, n, p], derived on creation.
    """
    t: npt.NDArray[np.float64]
    b: npt.NDArray[np.float64]
    n: npt.NDArray[np.float64]
    p: npt.NDArray[np.float64]
    transform: npt.NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for name in ("t", "b", "n", "p"):
            object.__setattr__(self, name, _read_only(as_point(getattr(self, name))))
        transform = _axes_to_transform(self.t, self.b, self.n, self.p)
        object.__setattr__(self, "transform", _read_only(transform))

    def is_orthonormal(self, tol: float = 1e-9) -> bool:
        """True if {t, b, n} are unit, pairwise orthogonal and right-handed."""
        axes = self.transform[:3, :3]
        return bool(
            np.allclose(axes.T @ axes, np.eye(3), atol=tol)
            and np.linalg.det(axes) > 0.0
        )


@dataclass(frozen=True)
class Cylinder:
    """
    A cylinder given by its radius and a frame on its axis.

    The frame origin is the midpoint of the two axis points and its local z
    axis points from the first axis point to the second.
    """
    radius: float
    frame: Frame

    @property
    def transform(self) -> npt.NDArray[np.float64]:
        return self.frame.transform

    @classmethod
    def from_axis(
        cls,
        c1: Sequence[float] | npt.NDArray[np.float64],
        c2: Sequence[float] | npt.NDArray[np.float64],
        radius: float
    ) -> Cylinder:
        """
        Args:
            c1: First point on the cylinder axis.
            c2: Second point on the cylinder axis.
            radius: Cylinder radius, must be positive.

        Raises:
            ValueError: If the radius is not positive.
            DegenerateInputError: If c1 and c2 coincide.
        """
        if radius <= 0.0:
            raise ValueError(f"Cylinder radius must be positive, got {radius}.")
        c1, c2 = as_point(c1), as_point(c2)

        n = unit_vector(c2 - c1)
        t, b = in_plane_axes(n, HELPER_AXIS_LIMIT)
        return cls(radius=float(radius), frame=Frame.from_axes(0.5 * (c1 + c2), t, b, n))
