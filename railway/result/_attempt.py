import functools
import logging
from collections.abc import Callable

from ._result import Result, Success, Failure
from .._exceptions import with_note

logger = logging.getLogger(__name__)


def attempt[**P, T, E: Exception](
    *exception_types: type[E],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, E]]]:
    """Decorator turning a function that raises into one that returns a result.

    Only exceptions of the given types are captured and returned as a failure.
    Any other exception propagates to the caller.
    A captured exception gets a note naming the function, added only once even if
    the same exception instance is raised again.

    Example:
        .. code-block:: python

            @attempt(json.JSONDecodeError)
            def decode(text: str) -> dict:
                return json.loads(text)

            decode("{}")  # Success({})
            decode("{")  # Failure(JSONDecodeError(...))
    """

    if not exception_types:
        raise ValueError("At least one exception type must be given")

    def decorator(func: Callable[P, T]) -> Callable[P, Result[T, E]]:
        name = getattr(func, "__qualname__", repr(func))

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
            try:
                value = func(*args, **kwargs)
            except exception_types as error:
                logger.debug("Step %s failed with %r.", name, error)
                note = f"Raised by {name}"
                if note not in getattr(error, "__notes__", ()):
                    with_note(error, note)
                return Failure(error)
            return Success(value)

        return wrapper

    return decorator
