"""Result Type - tagged union of a success value or a classified failure.

Invariants:
    - Ok carries the value, Err carries exactly one PlaceShareError
    - Services return Result; only the route layer unwraps it
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from placeshare.core.errors import PlaceShareError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: PlaceShareError


Result = Union[Ok[T], Err]
