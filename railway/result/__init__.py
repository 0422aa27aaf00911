"""Defines the result type and its variants: success and failure.

The Result type is a union type of Success and Failure, where Success contains a
successful value and Failure contains an error.

Steps that can fail are chained with :meth:`Success.map` and
:meth:`Success.flat_map`.
As soon as one step returns a failure, the remaining steps are skipped and the
failure is passed along unchanged to the end of the chain.

Example:
    .. code-block:: python

        from railway.result import Success, Failure, is_success

        def halve(x: int) -> Result[int, str]:
            if x % 2:
                return Failure(f"{x} is odd")
            return Success(x // 2)

        result = Success(12).flat_map(halve).flat_map(halve).map(str)
        if is_success(result):
            print(result.value)  # prints 3
        else:
            print(result.error)
"""

from ._attempt import attempt
from ._result import (
    Failure,
    Result,
    Success,
    from_optional,
    is_failure,
    is_failure_type,
    is_success,
    unwrap,
)

__all__ = [
    "Failure",
    "Result",
    "Success",
    "attempt",
    "from_optional",
    "is_failure",
    "is_failure_type",
    "is_success",
    "unwrap",
]
