"""Shared field types for request schemas.

Invariants:
    - NonEmptyText strips surrounding whitespace before checking length
"""

from typing import Annotated

from pydantic import StringConstraints

NonEmptyText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
DescriptionText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=5)]
