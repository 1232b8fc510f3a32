"""
Belt / global frame builder.

A belt frame is located at a measured origin point and oriented by the plane
fitted through the surrounding measurement points: its local z axis is the
plane's upward normal, its local x and y axes lie in the plane.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence
import logging

import numpy as np

from bladealign.config import HELPER_AXIS_LIMIT
from bladealign.model.fitting import points_to_plane
from bladealign.model.geometry_primitives import Frame
from bladealign.model.geometry_utils import as_point, unit_vector, in_plane_axes

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def get_belt_frame(
    o: Sequence[float] | npt.NDArray[np.float64],
    x: Sequence[float] | npt.NDArray[np.float64],
    y: Sequence[float] | npt.NDArray[np.float64],
    z: Sequence[float] | npt.NDArray[np.float64],
) -> Frame:
    """
    Build the frame at `o` oriented by the plane through (x, y, z).

    Args:
        o: Origin of the frame.
        x: X-coordinates of the points on the belt plane.
        y: Y-coordinates of the points on the belt plane.
        z: Z-coordinates of the points on the belt plane.

    Raises:
        ValueError: If the coordinate arrays are malformed.
        DegenerateInputError: If the points do not define a plane.

    Returns:
        The Frame with transform columns [t, b, n, o] and the matching
        [x, y, z, yaw, pitch, roll] vector in degrees.
    """
    plane = points_to_plane(x, y, z)
    n = unit_vector(plane.normal)
    t, b = in_plane_axes(n, HELPER_AXIS_LIMIT)

    frame = Frame.from_axes(as_point(o), t, b, n)
    logger.debug(f"Belt frame: {np.array2string(frame.vector, precision=4)}")
    return frame
