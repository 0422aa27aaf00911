import functools
import logging
from typing import Callable, TypeVar, ParamSpec


_P = ParamSpec("_P")
_T = TypeVar("_T")


def log_step(logger: logging.Logger, level: int = logging.DEBUG):
    """Decorator to log the start and end of a pipeline step.

    Nothing is logged on exit if the step raises; the exception goes through
    untouched.
    """

    def decorator(func: Callable[_P, _T]) -> Callable[_P, _T]:
        name = getattr(func, "__name__", repr(func))

        @functools.wraps(func)
        def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _T:
            logger.log(level, "Entering step %s.", name)
            result = func(*args, **kwargs)
            logger.log(level, "Exiting step %s.", name)
            return result

        return wrapper

    return decorator
