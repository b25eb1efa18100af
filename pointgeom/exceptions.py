"""Custom exception types to more accurately represent difficulties with points"""

__all__ = ["AxisUnavailableError", "DimensionalityError", "PointgeomException", "ScalarTypeError"]


class PointgeomException(Exception):
    "General base for exceptional situations related to the specifics of this project"


class DimensionalityError(PointgeomException, ValueError):
    """Error subtype for when the dimension of a point (or point type) doesn't satisfy a requirement"""


class AxisUnavailableError(DimensionalityError, AttributeError):
    """Error subtype for when a named axis (x, y, z) is used on a point of too small a dimension"""


class ScalarTypeError(PointgeomException, TypeError):
    """Error subtype for when a scalar type, or a value to store as a component, isn't acceptable"""
