"""
Closed-form linear least-squares fits: a plane through N >= 3 points and a
parabola through exactly three points.

Both solve a small square system with a column-pivoted QR factorization
(rank revealing), which tolerates mild ill-conditioning, and both refuse
singular systems instead of returning meaningless coefficients.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence
import logging

import numpy as np
from scipy import linalg

from bladealign.config import DEGENERACY_RCOND
from bladealign.model.errors import DegenerateInputError
from bladealign.model.geometry_primitives import Plane

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _solve_pivoted_qr(
    A: npt.NDArray[np.float64],
    rhs: npt.NDArray[np.float64],
    what: str
) -> npt.NDArray[np.float64]:
    """
    Solve the square system A @ x = rhs through A[:, P] = Q @ R.

    Args:
        A: (n, n) system matrix.
        rhs: (n, ) right-hand side.
        what: Name of the fit, used in log and error messages.

    Raises:
        DegenerateInputError: If the smallest pivot of R is negligible
            relative to the largest one.

    Returns:
        The solution vector x.
    """
    Q, R, P = linalg.qr(A, pivoting=True)
    pivots = np.abs(np.diag(R))

    if pivots[0] == 0.0 or pivots[-1] <= DEGENERACY_RCOND * pivots[0]:
        logger.warning(f"Singular {what} system, pivots: {pivots}.")
        raise DegenerateInputError(f"The {what} system is singular; the input points are degenerate.")

    z = linalg.solve_triangular(R, Q.T @ rhs)
    x = np.empty_like(z)
    x[P] = z
    return x


def points_to_plane(
    x: Sequence[float] | npt.NDArray[np.float64],
    y: Sequence[float] | npt.NDArray[np.float64],
    z: Sequence[float] | npt.NDArray[np.float64],
) -> Plane:
    """
    Least-squares plane z = aa*x + bb*y + dd through the given points.

    Args:
        x: X-coordinates of the points.
        y: Y-coordinates of the points.
        z: Z-coordinates of the points.

    Raises:
        ValueError: If the arrays differ in length or hold fewer than 3 points.
        DegenerateInputError: If the points are collinear or coincident in
            their (x, y) projection.

    Returns:
        The fitted Plane, with the implicit form derived from the height field.
    """
    x = np.array(x, dtype=np.float64).reshape(-1)
    y = np.array(y, dtype=np.float64).reshape(-1)
    z = np.array(z, dtype=np.float64).reshape(-1)

    if not (x.size == y.size == z.size):
        raise ValueError(f"Coordinate arrays must have equal length, got {x.size}, {y.size}, {z.size}.")
    if x.size < 3:
        raise ValueError(f"At least 3 points are required for a plane fit, got {x.size}.")

    # Normal equations of the height-field model about the centroid. The
    # offset row decouples, leaving a 2x2 system whose conditioning depends
    # on the shape of the point spread only, not on its distance from the origin.
    x_mean, y_mean, z_mean = x.mean(), y.mean(), z.mean()
    dx, dy, dz = x - x_mean, y - y_mean, z - z_mean
    U = np.array([
        [dx @ dx, dx @ dy],
        [dx @ dy, dy @ dy],
    ])
    V = np.array([dx @ dz, dy @ dz])

    aa, bb = _solve_pivoted_qr(U, V, what="plane fit")
    dd = z_mean - aa * x_mean - bb * y_mean
    plane = Plane.from_height_field(aa, bb, dd)
    logger.debug(f"Fitted plane through {x.size} points: {plane}")
    return plane


def poly(x0: float, x1: float, x2: float, y0: float, y1: float, y2: float) -> npt.NDArray[np.float64]:
    """
    Coefficients (a, b, c) of the parabola y = a*x^2 + b*x + c through
    (x0, y0), (x1, y1) and (x2, y2).

    Raises:
        DegenerateInputError: If two of the x-values coincide.
    """
    A = np.array([
        [x0 * x0, x0, 1.0],
        [x1 * x1, x1, 1.0],
        [x2 * x2, x2, 1.0],
    ])
    B = np.array([y0, y1, y2], dtype=np.float64)
    return _solve_pivoted_qr(A, B, what="quadratic fit")
