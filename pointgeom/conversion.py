"""Building 2D and 3D points, from components or from a point of any dimension"""

import logging
from typing import Any, Optional

from numpydoc_decorator import doc

from pointgeom.numeric_types import infer_scalar_type, validate_scalar_type
from pointgeom.point import Point, specialize

__all__ = [
    "adapt_dimension",
    "make_point2",
    "make_point3",
    "point2_from_components",
    "point2_from_point",
    "point3_from_components",
    "point3_from_point",
    ]


@doc(
    summary="Copy a point into a point of the given dimension, with the same scalar type",
    extended_summary="""
        The first min(M, dimension) components are copied in order, where M is the source's
        dimension; when the target is larger, the remaining components take the scalar type's
        default value (e.g., 0), and when it's smaller, the source's trailing components are dropped.
    """,
    parameters=dict(
        p="The point from which to copy components",
        dimension="The dimension of the point to build",
    ),
    raises=dict(
        TypeError="If the object to copy isn't a point",
        DimensionalityError="If the requested dimension is less than 1",
    ),
    returns="A new point of the requested dimension, sharing no state with the given point",
)
def adapt_dimension(p: Point, dimension: int) -> Point:
    if not isinstance(p, Point):
        raise TypeError(f"Can only adapt the dimension of a point, not a value of type {type(p).__name__}")
    target = specialize(type(p).scalar_type, dimension)
    result = target()
    shared = min(p.dimension(), dimension)
    for i in range(shared):
        result.unsafe_set(i, p.unsafe_get(i))
    if p.dimension() > dimension:
        logging.debug("Truncating %s to dimension %d", type(p).__name__, dimension)
    elif p.dimension() < dimension:
        logging.debug("Padding %s to dimension %d", type(p).__name__, dimension)
    return result


def point2_from_components(x: Any, y: Any, *, scalar_type: Optional[type] = None) -> Point:
    """Build a 2D point, with scalar type inferred from the components if not given."""
    return _from_components([x, y], scalar_type=scalar_type)


def point3_from_components(x: Any, y: Any, z: Any, *, scalar_type: Optional[type] = None) -> Point:
    """Build a 3D point, with scalar type inferred from the components if not given."""
    return _from_components([x, y, z], scalar_type=scalar_type)


@doc(
    summary="Copy a point into a 2D point, truncating or zero-padding as needed",
    parameters=dict(p="The point (of any dimension) from which to copy components"),
    returns="A new 2D point with the same scalar type as the given point",
)
def point2_from_point(p: Point) -> Point:
    return adapt_dimension(p, 2)


@doc(
    summary="Copy a point into a 3D point, truncating or zero-padding as needed",
    parameters=dict(p="The point (of any dimension) from which to copy components"),
    returns="A new 3D point with the same scalar type as the given point",
)
def point3_from_point(p: Point) -> Point:
    return adapt_dimension(p, 3)


def make_point2(*args: Any, scalar_type: Optional[type] = None) -> Point:
    """
    Build a 2D point, either from x and y values, or from a single point of any dimension.

    Examples:
        >>> make_point2(1, 2)
        Point[int, 2](1, 2)
        >>> make_point2(make_point3(1, 2, 3))
        Point[int, 2](1, 2)
    """
    match args:
        case (Point() as p,):
            _check_no_scalar_type_for_point(scalar_type)
            return point2_from_point(p)
        case (x, y):
            return point2_from_components(x, y, scalar_type=scalar_type)
        case _:
            raise TypeError(f"make_point2 takes either a point or 2 component values; got {len(args)} argument(s)")


def make_point3(*args: Any, scalar_type: Optional[type] = None) -> Point:
    """
    Build a 3D point, either from x, y, and z values, or from a single point of any dimension.

    Examples:
        >>> make_point3(5, 6, 7)
        Point[int, 3](5, 6, 7)
        >>> make_point3(make_point2(5, 6))
        Point[int, 3](5, 6, 0)
    """
    match args:
        case (Point() as p,):
            _check_no_scalar_type_for_point(scalar_type)
            return point3_from_point(p)
        case (x, y, z):
            return point3_from_components(x, y, z, scalar_type=scalar_type)
        case _:
            raise TypeError(f"make_point3 takes either a point or 3 component values; got {len(args)} argument(s)")


def _check_no_scalar_type_for_point(scalar_type: Optional[type]) -> None:
    if scalar_type is not None:
        raise TypeError("Scalar type may only be given when building from component values, not from a point")


def _from_components(values: list[Any], *, scalar_type: Optional[type]) -> Point:
    t = infer_scalar_type(values) if scalar_type is None else validate_scalar_type(scalar_type)
    return specialize(t, len(values)).from_components(values)
