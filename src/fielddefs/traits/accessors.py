"""Bound trait accessors, one class per trait category."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NamedTuple

from fielddefs.exceptions import MissingProviderError
from fielddefs.traits.category import ARG, TraitCategory

if TYPE_CHECKING:
    from fielddefs.field import FieldDescriptor
    from fielddefs.traits.registry import TraitKind

logger = logging.getLogger(__name__)


class MixedOverride(NamedTuple):
    """The stored override of a mixed trait."""

    value: Any
    func: Callable[..., Any]


class TraitAccessor:
    """
    A trait kind bound to one field.

    Calling the accessor either stores an override on the field (and returns
    the field for chaining) or reads the trait. Reads return the stored
    override when present and otherwise evaluate the trait kind's provider
    afresh; provider results are never cached.
    """

    category: TraitCategory

    def __init__(self, field: "FieldDescriptor", kind: "TraitKind") -> None:
        """Bind ``kind`` to ``field``."""
        self.field = field
        self.kind = kind

    @property
    def name(self) -> str:
        """The trait-kind name."""
        return self.kind.name

    def _default(self) -> Any:
        provider = self.field.schema.trait_kinds.kind(self.kind.name).provider
        if provider is None:
            if self.field.schema.settings.strict_providers:
                raise MissingProviderError(self.kind.name, self.field.name)
            logger.debug("Trait kind '%s' has no provider; field '%s' yields None.", self.kind.name, self.field.name)
            return None
        return provider(self.field)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} trait='{self.kind.name}' field='{self.field.name}'>"


class ProcTraitAccessor(TraitAccessor):
    """Accessor for callable-valued traits: ``accessor(func)`` sets, ``accessor()`` gets."""

    category = TraitCategory.PROC

    def __call__(self, func: Callable[..., Any] | None = None) -> Any:
        if func is None:
            if self.field.has_override(self.kind.name):
                return self.field._overrides[self.kind.name]
            return self._default()
        if not callable(func):
            raise TypeError(f"Trait '{self.kind.name}' expects a callable, got {type(func).__name__}.")
        self.field._overrides[self.kind.name] = func
        return self.field


class ArgTraitAccessor(TraitAccessor):
    """Accessor for plain-value traits: ``accessor(value)`` sets, ``accessor()`` gets."""

    category = TraitCategory.ARG

    def __call__(self, *args: Any) -> Any:
        if len(args) > 1:
            raise TypeError(f"Trait '{self.kind.name}' takes at most one value, got {len(args)}.")
        if not args:
            if self.field.has_override(self.kind.name):
                return self.field._overrides[self.kind.name]
            return self._default()
        self.field._overrides[self.kind.name] = args[0]
        return self.field


class MixedTraitAccessor(TraitAccessor):
    """
    Accessor for traits pairing a value with a callable.

    ``accessor(value, func)`` sets both parts, ``accessor(ARG)`` reads the
    value and ``accessor()`` reads the callable. The provider returns a
    ``(value, callable)`` pair.
    """

    category = TraitCategory.MIXED

    def __call__(self, *args: Any) -> Any:
        if not args:
            return self._part(1)
        if len(args) == 1 and args[0] is ARG:
            return self._part(0)
        if len(args) != 2:
            raise TypeError(
                f"Trait '{self.kind.name}' is set with a value and a callable, "
                f"or read with no arguments or with ARG."
            )
        value, func = args
        if not callable(func):
            raise TypeError(f"Trait '{self.kind.name}' expects a callable, got {type(func).__name__}.")
        self.field._overrides[self.kind.name] = MixedOverride(value, func)
        return self.field

    def _part(self, index: int) -> Any:
        if self.field.has_override(self.kind.name):
            return self.field._overrides[self.kind.name][index]
        default = self._default()
        if default is None:
            return None
        value, func = default
        return value if index == 0 else func


ACCESSOR_CLASSES: dict[TraitCategory, type[TraitAccessor]] = {
    TraitCategory.PROC: ProcTraitAccessor,
    TraitCategory.ARG: ArgTraitAccessor,
    TraitCategory.MIXED: MixedTraitAccessor,
}
