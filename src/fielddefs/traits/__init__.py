"""Trait kinds, their categories and the accessors bound to fields."""

from .accessors import ArgTraitAccessor, MixedOverride, MixedTraitAccessor, ProcTraitAccessor, TraitAccessor
from .category import ARG, TraitCategory
from .registry import Provider, TraitKind, TraitKindRegistry

__all__ = [
    "ARG",
    "ArgTraitAccessor",
    "MixedOverride",
    "MixedTraitAccessor",
    "ProcTraitAccessor",
    "Provider",
    "TraitAccessor",
    "TraitCategory",
    "TraitKind",
    "TraitKindRegistry",
]
