"""Domain error taxonomy."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A constructor or mutator precondition was violated.

    Raised synchronously for empty or non-string names, future birth dates,
    salaries that round to zero cents or exceed the salary cap, empty roles,
    negative raise percentages, non-positive minimum wages, months outside
    1-12, and amounts too large to round to cents.
    """
