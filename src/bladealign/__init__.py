"""
bladealign
==========
Geometry engine for locating a measured blade against a reference
coordinate system: plane and quadratic fits, homogeneous transforms,
Euler angles, local (Frene) frames and belt frames.
"""
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("bladealign")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
