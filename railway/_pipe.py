from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

import attrs


def pipe[A, B](value: A, func: Callable[[A], B]) -> B:
    """Pass a value to a function.

    ``pipe(x, f)`` is the same as ``f(x)``, written in the order the data flows.
    """

    return func(value)


def pipe_through(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """Pass a value through several functions, from left to right.

    ``pipe_through(x, f, g)`` is the same as ``g(f(x))``.
    """

    return functools.reduce(pipe, funcs, value)


@attrs.frozen
class Piped[T]:
    """Value that can be passed to functions with ``|``.

    Example:
        .. code-block:: python

            assert (Piped("abc") | str.upper | len).value == 3
    """

    value: T

    def __or__[R](self, func: Callable[[T], R]) -> Piped[R]:
        if callable(func):
            return Piped(func(self.value))
        else:
            return NotImplemented
