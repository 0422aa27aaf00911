"""Small toolkit to compose functions and chain steps that can fail.

The functions of this package read in the order the data flows:

- :func:`pipe` passes a value to a function,
- :func:`compose` builds a function that calls a first function, then a second one,
- :mod:`railway.result` contains a result type to chain steps that can fail.
"""

from ._compose import compose, compose_all, identity, Composable
from ._logging import log_step
from ._pipe import pipe, pipe_through, Piped
from .result import Result, Success, Failure

__all__ = [
    "pipe",
    "pipe_through",
    "Piped",
    "compose",
    "compose_all",
    "identity",
    "Composable",
    "log_step",
    "Result",
    "Success",
    "Failure",
]
