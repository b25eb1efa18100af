"""Test fixtures and utilities"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pointgeom import Point

ALL_SCALAR_TYPES = [int, float, Fraction, Decimal, np.float32, np.int64]


#################################################################
# Fixtures
#################################################################
@pytest.fixture(params=ALL_SCALAR_TYPES, ids=lambda t: t.__name__)
def scalar_type(request):
    return request.param


@pytest.fixture(params=[1, 2, 3, 4, 7], ids=lambda n: f"{n}D")
def dimension(request):
    return request.param


@pytest.fixture
def int_point2():
    return Point[int, 2](1, 2)


@pytest.fixture
def int_point3():
    return Point[int, 3](1, 2, 3)


#################################################################
# Other helpers
#################################################################
def components_of(p: Point) -> list:
    return [p[i] for i in range(p.dimension())]
