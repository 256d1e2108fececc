"""Trait categories and the value sentinel used by mixed traits."""

from enum import Enum


class TraitCategory(Enum):
    """The call shape of a trait kind."""

    PROC = "proc"
    """Callable-valued: the trait stores or provides a callable."""
    ARG = "arg"
    """Plain-value: the trait stores or provides a single value."""
    MIXED = "mixed"
    """A value and a callable configured together under one name."""


class _ArgSentinel(Enum):
    ARG = "arg"

    def __repr__(self) -> str:
        return "ARG"


ARG = _ArgSentinel.ARG
"""Pass to a mixed trait accessor to read its value instead of its callable."""
