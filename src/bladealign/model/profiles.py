"""Measured blade data model: profiles (span stations) and the airfoil."""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Dict, Sequence

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class Cloud(StrEnum):
    """Names of the point clouds measured at every span station."""
    CX = "cx"  # cross-section
    CV = "cv"  # convex side
    LE = "le"  # leading edge
    RE = "re"  # trailing edge


def _to_cloud(points: Sequence[Sequence[float]] | npt.NDArray[np.float64], name: str) -> npt.NDArray[np.float64]:
    arr = np.array(points, dtype=np.float64)
    if arr.size == 0:
        arr = arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"Cloud '{name}' must have shape (N, 3), got {arr.shape}.")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class Profile:
    """
    Point clouds measured at one span station of the blade.

    Each cloud is a read-only (N, 3) array of [x, y, z] rows.
    """
    cx: npt.NDArray[np.float64]
    cv: npt.NDArray[np.float64]
    le: npt.NDArray[np.float64]
    re: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        for cloud in Cloud:
            object.__setattr__(self, cloud.value, _to_cloud(getattr(self, cloud.value), cloud.value))

    def cloud(self, name: Cloud | str) -> npt.NDArray[np.float64]:
        return getattr(self, Cloud(name).value)

    def xyz(self, name: Cloud | str) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """The x, y and z columns of a cloud, as taken by `points_to_plane`."""
        points = self.cloud(name)
        return points[:, 0], points[:, 1], points[:, 2]

    def to_dict(self) -> Dict[str, Any]:
        return {cloud.value: self.cloud(cloud).tolist() for cloud in Cloud}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Profile:
        """
        Raises:
            ValueError: If a cloud is missing or is not a list of [x, y, z] triples.
        """
        missing = [cloud.value for cloud in Cloud if cloud.value not in data]
        if missing:
            raise ValueError(f"Profile is missing point clouds: {', '.join(missing)}.")
        return Profile(**{cloud.value: data[cloud.value] for cloud in Cloud})


# One profile per span station, root to tip
Airfoil = tuple[Profile, ...]
