"""
Fixed-dimension points over a numeric scalar type

A point type is specialized by scalar type and dimension, e.g. Point[int, 3], and that
specialization is created once and cached, so repeated requests give the very same class. Instances
of a specialization always hold exactly as many components as the dimension, each an
instance of the scalar type.

The dimension requirements of the named axes (x needs 1, y needs 2, z needs 3) and of the
2- and 3-value constructors are checked when they're used, by raising a DimensionalityError
subtype. A dimension less than 1 is rejected already when the specialization is requested.
"""

import logging
import operator
from typing import Any, ClassVar, Iterable, Iterator, Optional, SupportsIndex

import attrs
from expression import Option, Result
import numpy as np

from pointgeom.exceptions import AxisUnavailableError, DimensionalityError
from pointgeom.numeric_types import coerce_scalar, default_scalar_value, is_scalar_value, validate_scalar_type
from pointgeom.utilities import result_to_option, wrap_exception

__all__ = ["DEFAULT_DIMENSION", "Point", "Point2", "Point3", "PointFamily", "specialize"]

DEFAULT_DIMENSION = 2

AXIS_NAMES = ("x", "y", "z")

_SPECIALIZATIONS: dict[tuple[type, int], type["Point"]] = {}


def _validate_dimension(n: Any) -> int:
    if isinstance(n, (bool, np.bool_)): # Handle the fact that Boolean is integer-like.
        raise TypeError(f"Dimension ({n}) (type={type(n).__name__}) is not integer-like!")
    try:
        dimension = operator.index(n)
    except TypeError as e:
        raise TypeError(f"Dimension ({n}) (type={type(n).__name__}) is not integer-like!") from e
    if dimension < 1:
        raise DimensionalityError(f"Dimension must be at least 1; got {dimension}")
    return dimension


def _has_point_dimension(instance: "Point", attribute: attrs.Attribute, value: list) -> None:
    n = instance.dimension()
    if len(value) != n:
        raise DimensionalityError(f"{type(instance).__name__} needs exactly {n} component(s); got {len(value)}")


def specialize(scalar_type: type, dimension: int = DEFAULT_DIMENSION) -> type["Point"]:
    """Get the point type for the given scalar type and dimension, creating it on first request."""
    scalar_type = validate_scalar_type(scalar_type)
    dimension = _validate_dimension(dimension)
    key = (scalar_type, dimension)
    try:
        return _SPECIALIZATIONS[key]
    except KeyError:
        pass
    name = f"Point[{scalar_type.__name__}, {dimension}]"
    logging.debug("Creating point specialization: %s", name)
    cls = type(name, (Point,), {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "scalar_type": scalar_type,
        "_dimension": dimension,
    })
    return _SPECIALIZATIONS.setdefault(key, cls)


def _axis_property(index: int) -> property:
    name = AXIS_NAMES[index]

    def getter(self: "Point") -> Any:
        self._check_axis(index)
        return self._components[index]

    def setter(self: "Point", value: Any) -> None:
        self._check_axis(index)
        self._components[index] = self._coerce(value, ctx=f"Component {name}")

    return property(getter, setter, doc=f"Component {index}, the {name} axis; requires dimension of at least {index + 1}")


@attrs.define(init=False)
class Point:
    """
    General abstraction of a point in N-dimensional (assumed Euclidean) space

    Use a specialization to build instances: Point[float, 3](1.0, 2.0, 3.0), or Point[int]()
    for the default dimension of 2. Points compare equal when they're of the same specialization
    and have equal components. They're mutable, through the axis properties, through indexing,
    and through the in-place arithmetic operators, so they're not hashable.
    """

    scalar_type: ClassVar[Optional[type]] = None
    _dimension: ClassVar[Optional[int]] = None

    _components = attrs.field(validator=[attrs.validators.instance_of(list), _has_point_dimension]) # type: list

    # Let numpy scalars on the left of an operator defer to this type, rather than broadcasting.
    __array_ufunc__ = None

    def __init__(self, *values: Any) -> None:
        cls = type(self)
        n = cls.dimension()
        match len(values):
            case 0:
                pass
            case 2 | 3 as k:
                if k > n:
                    raise DimensionalityError(f"{k}-value construction needs dimension of at least {k}, but {cls.__name__} has dimension {n}")
            case k:
                raise TypeError(f"{cls.__name__} takes 0, 2, or 3 component values, not {k}")
        components = [default_scalar_value(cls.scalar_type)] * n
        for i, v in enumerate(values):
            components[i] = self._coerce(v, ctx=f"Component {i}")
        self._components = components

    @classmethod
    def __class_getitem__(cls, params: Any) -> type["Point"]:
        if cls._dimension is not None:
            raise TypeError(f"{cls.__name__} is already specialized")
        match params:
            case (scalar_type, dimension):
                return specialize(scalar_type, dimension)
            case tuple():
                raise TypeError(f"Point takes a scalar type and optionally a dimension; got {len(params)} parameter(s)")
            case scalar_type:
                return specialize(scalar_type, DEFAULT_DIMENSION)

    @classmethod
    def dimension(cls) -> int:
        """The number of components in each point of this type"""
        if cls._dimension is None:
            raise TypeError("Point must be specialized before use, e.g. Point[int, 2]")
        return cls._dimension

    @classmethod
    def from_components(cls, values: Iterable[Any]) -> "Point":
        """Build a point from exactly as many values as the dimension, in axis order."""
        values = list(values)
        n = cls.dimension()
        if len(values) != n:
            raise DimensionalityError(f"{cls.__name__} needs exactly {n} component(s); got {len(values)}")
        p = cls()
        p._components = [p._coerce(v, ctx=f"Component {i}") for i, v in enumerate(values)]
        return p

    @classmethod
    def try_from_components(cls, values: Iterable[Any]) -> Result["Point", Exception]:
        return wrap_exception((TypeError, ValueError))(cls.from_components)(values)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Point":
        """Build a point from a 1D array, whose length must match the dimension."""
        arr = np.asarray(arr)
        if arr.ndim != 1:
            raise DimensionalityError(f"Array to build {cls.__name__} must be 1D; got shape {arr.shape}")
        # Elements stay numpy scalars here, unlike with .tolist().
        return cls.from_components(list(arr))

    x = _axis_property(0)
    y = _axis_property(1)
    z = _axis_property(2)

    def copy(self) -> "Point":
        """Get an independent point of the same type, with the same components."""
        return type(self).from_components(self._components)

    def __copy__(self) -> "Point":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Point":
        # Scalars are immutable, so a new component list is all that's needed.
        return self.copy()

    def __len__(self) -> int:
        return self.dimension()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._components)

    def __getitem__(self, index: SupportsIndex) -> Any:
        return self._components[self._check_index(index)]

    def __setitem__(self, index: SupportsIndex, value: Any) -> None:
        i = self._check_index(index)
        self._components[i] = self._coerce(value, ctx=f"Component {i}")

    def try_get(self, index: SupportsIndex) -> Option[Any]:
        return result_to_option(wrap_exception((IndexError, TypeError))(self.__getitem__)(index))

    def unsafe_get(self, index: int) -> Any:
        """
        Get a component with no check of the index.

        This is the fast path for code which already guarantees 0 <= index < dimension;
        for any other index, the outcome is not part of this type's contract.
        """
        return self._components[index]

    def unsafe_set(self, index: int, value: Any) -> None:
        """
        Set a component with no check of the index or of the value's type.

        The caller guarantees 0 <= index < dimension and that value is of the scalar type.
        """
        self._components[index] = value

    def to_tuple(self) -> tuple:
        return tuple(self._components)

    def to_array(self) -> np.ndarray:
        return np.array(self._components)

    def __iadd__(self, other: "Point") -> "Point":
        if not self._is_same_kind(other):
            return NotImplemented
        for i, v in enumerate(other._components):
            self._components[i] += v
        return self

    def __isub__(self, other: "Point") -> "Point":
        if not self._is_same_kind(other):
            return NotImplemented
        for i, v in enumerate(other._components):
            self._components[i] -= v
        return self

    def __imul__(self, factor: Any) -> "Point":
        if not is_scalar_value(factor):
            return NotImplemented
        factor = self._coerce(factor, ctx="Scalar factor")
        for i in range(len(self._components)):
            self._components[i] *= factor
        return self

    def __add__(self, other: "Point") -> "Point":
        if not self._is_same_kind(other):
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: "Point") -> "Point":
        if not self._is_same_kind(other):
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __mul__(self, factor: Any) -> "Point":
        if not is_scalar_value(factor):
            return NotImplemented
        result = self.copy()
        result *= factor
        return result

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._components))})"

    def _check_axis(self, index: int) -> None:
        n = self.dimension()
        if index >= n:
            name = AXIS_NAMES[index]
            raise AxisUnavailableError(
                f"Axis '{name}' needs dimension of at least {index + 1}, but {type(self).__name__} has dimension {n}"
            )

    def _check_index(self, index: SupportsIndex) -> int:
        try:
            i = operator.index(index)
        except TypeError as e:
            raise TypeError(f"Point index must be integer-like, not {type(index).__name__}") from e
        n = self.dimension()
        if not -n <= i < n:
            raise IndexError(f"Index {i} is out of range for point of dimension {n}")
        return i

    def _coerce(self, value: Any, *, ctx: str) -> Any:
        return coerce_scalar(value, type(self).scalar_type, ctx=ctx)

    def _is_same_kind(self, other: Any) -> bool:
        return type(other) is type(self)


@attrs.define(frozen=True, repr=False)
class PointFamily:
    """
    All point specializations sharing one dimension, indexed by scalar type

    Point2[float] is Point[float, 2], and isinstance(p, Point2) holds for any 2D point.
    """
    dimension = attrs.field(validator=lambda _1, _2, n: _validate_dimension(n)) # type: int

    def __getitem__(self, scalar_type: type) -> type[Point]:
        return specialize(scalar_type, self.dimension)

    def __instancecheck__(self, obj: Any) -> bool:
        return isinstance(obj, Point) and type(obj)._dimension == self.dimension

    def __repr__(self) -> str:
        return f"Point{self.dimension}"


Point2 = PointFamily(2)
Point3 = PointFamily(3)
