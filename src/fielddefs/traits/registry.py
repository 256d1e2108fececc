"""Per-schema registry of trait kinds."""

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fielddefs.exceptions import RegistrationConflictError, UnknownTraitKindError
from fielddefs.traits.category import TraitCategory

if TYPE_CHECKING:
    from fielddefs.field import FieldDescriptor

logger = logging.getLogger(__name__)

Provider = Callable[["FieldDescriptor"], Any]


@dataclass(frozen=True)
class TraitKind:
    """A named trait kind: its category and its current default provider."""

    name: str
    category: TraitCategory
    provider: Provider | None = None


class TraitKindRegistry(Mapping[str, TraitKind]):
    """
    Maps trait-kind names to their category and default provider.

    Every schema owns exactly one registry. The category of a name is fixed by
    its first registration; later registrations under the same category only
    replace the provider.
    """

    def __init__(self, reserved_names: frozenset[str] = frozenset()) -> None:
        """
        Initialize an empty registry.

        Args:
            reserved_names: Names that may not be used for trait kinds because
                they would shadow members of the field descriptor type.

        """
        self._kinds: dict[str, TraitKind] = {}
        self._reserved_names = reserved_names

    def register(self, name: str, category: TraitCategory, provider: Provider | None = None) -> TraitKind:
        """
        Register a trait kind or replace the provider of an existing one.

        Args:
            name: The trait-kind name. Must be a valid Python identifier.
            category: The category the trait kind belongs to.
            provider: Computes the default for a field when no override is
                stored. May be ``None``.

        Returns:
            The registered trait kind.

        Raises:
            ValueError: If ``name`` is not a valid identifier or starts with an underscore.
            RegistrationConflictError: If ``name`` is reserved or was already
                registered under a different category.

        """
        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"Invalid trait kind name {name!r}. Trait kind names must be valid Python identifiers.")
        if name.startswith("_"):
            raise ValueError(f"Invalid trait kind name {name!r}. Trait kind names may not start with an underscore.")
        if name in self._reserved_names:
            raise RegistrationConflictError(
                f"Trait kind name '{name}' is reserved by the field descriptor.", trait_name=name
            )
        if not isinstance(category, TraitCategory):
            raise TypeError(f"category must be a TraitCategory, got {type(category)}")

        existing = self._kinds.get(name)
        if existing is not None and existing.category is not category:
            raise RegistrationConflictError(
                f"Trait kind '{name}' is already registered with a different category.",
                trait_name=name,
                existing=existing.category,
                requested=category,
            )
        if existing is not None:
            logger.debug("Replacing default provider for trait kind '%s'.", name)
        else:
            logger.debug("Registered %s trait kind '%s'.", category.name, name)

        kind = TraitKind(name=name, category=category, provider=provider)
        self._kinds[name] = kind
        return kind

    def kind(self, name: str) -> TraitKind:
        """
        Return the trait kind registered under ``name``.

        Raises:
            UnknownTraitKindError: If no trait kind of that name is registered.

        """
        try:
            return self._kinds[name]
        except KeyError:
            raise UnknownTraitKindError(name) from None

    def names_in(self, category: TraitCategory) -> list[str]:
        """Return the names of all trait kinds of a category, in registration order."""
        return [name for name, kind in self._kinds.items() if kind.category is category]

    def __getitem__(self, name: str) -> TraitKind:
        return self._kinds[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._kinds)

    def __len__(self) -> int:
        return len(self._kinds)

    def __repr__(self) -> str:
        return f"<TraitKindRegistry kinds={list(self._kinds)!r}>"
