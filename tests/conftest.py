import numpy as np
import pytest


@pytest.fixture
def belt_points():
    """Origin and belt plane points measured on the fixture (mm)."""
    o = np.array([1009.15, -16.49, 623.81])
    x = np.array([996.14, 1010.89, 1010.89, 1023.99, 1014.15, 1014.15, 1004.89, 1004.89, 1009.15])
    y = np.array([-16.14, -29.24, 0.92, -16.14, -10.54, -22.95, -22.21, -10.51, -16.49])
    z = np.array([625.57, 623.52, 623.48, 622.35, 623.61, 622.86, 624.73, 624.40, 623.81])
    return o, x, y, z
