"""Tests for the general-purpose utilities"""

from expression import Result, result
import pytest

from pointgeom.utilities import result_to_option, wrap_exception


@wrap_exception(IndexError)
def first(xs: list[int]) -> int:
    return xs[0]


def test_wrap_exception__gives_ok_for_normal_return():
    match first([3, 4]):
        case result.Result(tag="ok", ok=x):
            assert x == 3
        case unexpected:
            pytest.fail(f"Expected Ok-wrapped value but got {unexpected}")


def test_wrap_exception__gives_error_for_named_exception():
    match first([]):
        case result.Result(tag="error", error=err):
            assert isinstance(err, IndexError)
        case unexpected:
            pytest.fail(f"Expected Error-wrapped value but got {unexpected}")


def test_wrap_exception__lets_other_exceptions_propagate():
    with pytest.raises(TypeError):
        first(None)


def test_result_to_option():
    assert result_to_option(Result.Ok(1)).default_value(None) == 1
    assert result_to_option(Result.Error("uh oh")).is_none()


def test_result_to_option__rejects_non_result():
    with pytest.raises(TypeError):
        result_to_option(1)
