class DegenerateInputError(ValueError):
    """
    Raised when the input cannot define the requested geometry.

    Examples are collinear points passed to a plane fit, coincident
    x-values passed to a quadratic fit, or a zero-length direction that
    would have to be normalized.
    """
