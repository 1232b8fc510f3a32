"""
Configuration & Constants
=========================
Central registry of the numeric policy constants used by the geometry engine.

None of the tolerances here are meant to be tuned at runtime; they are part
of the conventions the frames are built with.

Exports:
    ROTATION_SNAP_EPS (float): Entries of axis rotation matrices with an
        absolute value at or below this are snapped to exactly 0.
    GIMBAL_LOCK_EPS (float): cos(pitch) threshold below which Euler
        decomposition switches to the gimbal-lock fallback.
    DEGENERACY_RCOND (float): Relative pivot threshold of the pivoted QR solve
        below which a linear system is reported as singular.
    ZERO_LENGTH_EPS (float): Vectors shorter than this cannot be normalized.
    HELPER_AXIS_LIMIT (float): |n.x| limit above which the belt frame uses
        global Y instead of global X as its in-plane helper axis.
"""
ROTATION_SNAP_EPS: float = 1e-4
GIMBAL_LOCK_EPS: float = 1e-9
DEGENERACY_RCOND: float = 1e-13
ZERO_LENGTH_EPS: float = 1e-12
HELPER_AXIS_LIMIT: float = 0.9
