"""Fixed-dimension points (2D, 3D, and generally N-D) over a numeric scalar type"""

from pointgeom.exceptions import AxisUnavailableError, DimensionalityError, PointgeomException, ScalarTypeError
from pointgeom.point import DEFAULT_DIMENSION, Point, Point2, Point3, PointFamily, specialize
from pointgeom.conversion import (
    adapt_dimension,
    make_point2,
    make_point3,
    point2_from_components,
    point2_from_point,
    point3_from_components,
    point3_from_point,
)

__all__ = [
    "DEFAULT_DIMENSION",
    "AxisUnavailableError",
    "DimensionalityError",
    "Point",
    "Point2",
    "Point3",
    "PointFamily",
    "PointgeomException",
    "ScalarTypeError",
    "adapt_dimension",
    "make_point2",
    "make_point3",
    "point2_from_components",
    "point2_from_point",
    "point3_from_components",
    "point3_from_point",
    "specialize",
    ]
