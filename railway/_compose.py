from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any


def identity[T](x: T) -> T:
    return x


def compose[A, B, C](f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """Combine two functions into one that calls f, then g on its output.

    Neither function is called when composing.
    Each call of the returned function calls f once and then g once, and nothing
    is cached between calls.
    """

    def _composed(x: A) -> C:
        return g(f(x))

    return _composed


def compose_all(*funcs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose any number of functions, from left to right."""

    return functools.reduce(compose, funcs, identity)


class Composable[A, B]:
    """Single-argument function that can be composed with ``>>``.

    ``Composable(f) >> g`` is a new composable that calls ``f`` then ``g``.
    """

    def __init__(self, func: Callable[[A], B]):
        self._func = func

    def __call__(self, x: A) -> B:
        return self._func(x)

    def __rshift__[C](self, other: Callable[[B], C]) -> Composable[A, C]:
        if callable(other):
            return Composable(compose(self._func, other))
        else:
            return NotImplemented

    def __rrshift__[Z](self, other: Callable[[Z], A]) -> Composable[Z, B]:
        if callable(other):
            return Composable(compose(other, self._func))
        else:
            return NotImplemented

    def __repr__(self) -> str:
        return f"Composable({self._func!r})"
