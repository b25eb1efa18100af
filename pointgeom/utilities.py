"""Very general-purpose utilities"""

import functools
from typing import Callable, ParamSpec, TypeVar

from expression import Option, Result, curry_flip
from expression import result

_A = TypeVar("_A")
_P = ParamSpec("_P")

_Exception = TypeVar("_Exception", bound=Exception)


# Courtesy of @Hugovdberg in Issues discussion on dbratti/Expression repo
@curry_flip(1)
def wrap_exception(
    fun: Callable[_P, _A],
    exc: type[_Exception] | tuple[type[_Exception], ...] = Exception,
) -> Callable[_P, Result[_A, _Exception]]:
    """Wrap a function that might raise an Exception in a Result monad

    Args:
        fun (Callable[P, a]):
            The function to be wrapped.
        exc (Union[Tuple[Type[Exception], ...], Type[Exception]], optional):
            The Exception types to be wrapped into the monad. Defaults to Exception.

    Returns:
        Callable[P, Result[a, Exception]]:
            The decorated function.

    Examples:
        >>> @wrap_exception(IndexError)
        ... def first(xs: list[int]) -> int:
        ...     return xs[0]
        >>> t: Result[int, IndexError] = first([])
    """

    @functools.wraps(fun)
    def _wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Result[_A, _Exception]:
        try:
            return Result[_A, _Exception].Ok(fun(*args, **kwargs))
        except exc as e:
            return Result[_A, _Exception].Error(e)

    return _wrapper


def result_to_option(res: Result[_A, object]) -> Option[_A]:
    """Keep the value of a successful result, discarding the error of a failed one."""
    match res:
        case result.Result(tag="ok", ok=value):
            return Option.Some(value)
        case result.Result(tag="error", error=_):
            return Option.Nothing()
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")
