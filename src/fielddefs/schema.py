"""The Schema: fields and trait kinds declared for one subject type."""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from fielddefs.config import FieldDefsSettings, get_settings
from fielddefs.defaults import DefaultChain, global_defaults, seed_builtin_trait_kinds
from fielddefs.exceptions import FieldNotFoundError
from fielddefs.field import FieldDescriptor, reserved_trait_names
from fielddefs.traits.category import TraitCategory
from fielddefs.traits.registry import Provider, TraitKind, TraitKindRegistry

P = TypeVar("P", bound=Provider)

_MISSING: Any = object()


class Schema:
    """
    The field definitions for one subject type.

    A schema owns its own trait-kind registry and a mapping from field name to
    :class:`FieldDescriptor`, kept in declaration order. Construction seeds the
    built-in trait kinds, replays the default chain, then runs the
    declarations::

        def declare(schema):
            schema.field("name")
            schema.field("age").display_proc(lambda age: f"{age} years old")
            schema.field("calorie_intake").human_name("% Daily value USDA recommended intake")

        person_fields = Schema(Person, declare)
        person_fields.display_for(person, "age")  # -> "24 years old"

    Trait kinds registered on one schema, including those registered by the
    default chain, never leak into another schema.
    """

    def __init__(
        self,
        subject_type: Any,
        declarations: Callable[["Schema"], None] | None = None,
        *,
        chain: DefaultChain | None = None,
        settings: FieldDefsSettings | None = None,
    ) -> None:
        """
        Build the schema.

        Args:
            subject_type: The type the fields describe. Providers may read it
                through ``field.subject_type``.
            declarations: Called with the new schema to declare fields and
                schema-local trait kinds.
            chain: The default chain to replay. Defaults to the global chain.
            settings: Framework settings. Defaults to :func:`get_settings`.

        """
        self._subject_type = subject_type
        self.settings: FieldDefsSettings = settings if settings is not None else get_settings()
        self._trait_kinds = TraitKindRegistry(reserved_names=reserved_trait_names())
        self._fields: dict[str, FieldDescriptor] = {}
        self._all_attributes: dict[str, Any] | None = None

        subject_name = getattr(subject_type, "__name__", repr(subject_type))
        self.logger = logging.getLogger(f"{__name__}.{subject_name}")

        seed_builtin_trait_kinds(self)
        default_chain = global_defaults if chain is None else chain
        snapshot = default_chain.snapshot()
        default_chain.apply(self, snapshot)
        self.logger.debug("Applied %d default chain callbacks to schema for %s.", len(snapshot.callbacks), subject_name)

        if declarations is not None:
            declarations(self)
        self.logger.info(
            "Schema for %s built with %d fields and %d trait kinds.",
            subject_name,
            len(self._fields),
            len(self._trait_kinds),
        )

    @classmethod
    def construct(
        cls,
        subject_type: Any,
        declarations: Callable[["Schema"], None] | None = None,
        **kwargs: Any,
    ) -> "Schema":
        """Build a schema for ``subject_type``; see :meth:`__init__`."""
        return cls(subject_type, declarations, **kwargs)

    @property
    def subject_type(self) -> Any:
        """The type this schema describes."""
        return self._subject_type

    @property
    def trait_kinds(self) -> TraitKindRegistry:
        """The trait kinds registered on this schema."""
        return self._trait_kinds

    # --- Trait kind registration ---

    def register_trait_kind(
        self, name: str, category: TraitCategory, provider: Provider | None = None
    ) -> TraitKind:
        """
        Register a trait kind on this schema, or replace its default provider.

        Every field of the schema gains an accessor for the trait kind. The
        provider is called with the field each time the trait is read without
        an override; its result is never cached.

        Raises:
            RegistrationConflictError: If ``name`` already exists under another
                category or is reserved.

        """
        return self._trait_kinds.register(name, category, provider)

    def _registration(self, name: str, category: TraitCategory, provider: Any) -> Any:
        if provider is not _MISSING:
            self.register_trait_kind(name, category, provider)
            return provider

        def decorator(func: P) -> P:
            self.register_trait_kind(name, category, func)
            return func

        return decorator

    def default_for_proc_type(self, name: str, provider: Provider | None = _MISSING) -> Any:
        """
        Register a callable-valued trait kind.

        The provider returns the default callable for a field. Without a
        provider, returns a decorator::

            @schema.default_for_proc_type("changes")
            def changes(field):
                return lambda thing: thing.changes[field.name]

        """
        return self._registration(name, TraitCategory.PROC, provider)

    def default_for_arg_type(self, name: str, provider: Provider | None = _MISSING) -> Any:
        """Register a plain-value trait kind. Usable as a decorator."""
        return self._registration(name, TraitCategory.ARG, provider)

    def default_for_mixed_type(self, name: str, provider: Provider | None = _MISSING) -> Any:
        """
        Register a trait kind pairing a value with a callable. Usable as a decorator.

        The provider returns a ``(value, callable)`` pair.
        """
        return self._registration(name, TraitCategory.MIXED, provider)

    # --- Field declaration ---

    def field(
        self, name: str, configure: Callable[[FieldDescriptor], Any] | None = None
    ) -> FieldDescriptor:
        """
        Declare a field, replacing any earlier field of the same name.

        Args:
            name: The field name.
            configure: Optionally called with the new descriptor.

        Returns:
            The new descriptor, for further configuration.

        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Field name must be a non-empty string, got {name!r}.")
        if name in self._fields:
            self.logger.debug("Redeclaring field '%s'.", name)
        descriptor = FieldDescriptor(name, self)
        self._fields[name] = descriptor
        self._all_attributes = None
        if configure is not None:
            configure(descriptor)
        return descriptor

    # --- Queries ---

    def field_called(self, name: str | None) -> FieldDescriptor | None:
        """Return the field called ``name``, or None."""
        if not name:
            return None
        return self._fields.get(str(name))

    def fields_called(self, names: Iterable[str]) -> list[FieldDescriptor]:
        """
        Return the fields with the given names, in the given order.

        Raises:
            FieldNotFoundError: For the first name that has no field.

        """
        found: list[FieldDescriptor] = []
        for name in names:
            descriptor = self.field_called(name)
            if descriptor is None:
                raise FieldNotFoundError(name)
            found.append(descriptor)
        return found

    def all_fields(self) -> list[FieldDescriptor]:
        """Return every field in declaration order."""
        return list(self._fields.values())

    def all_fields_labeled(self, label_name: str) -> list[FieldDescriptor]:
        """Return the fields carrying ``label_name``, in declaration order."""
        return [descriptor for descriptor in self._fields.values() if descriptor.has_label(label_name)]

    def all_attributes(self) -> dict[str, Any]:
        """
        Return a mapping of field name to human name for every field.

        The mapping is computed once and reused until another field is
        declared on this schema.
        """
        if self._all_attributes is None:
            self._all_attributes = {name: descriptor.human_name() for name, descriptor in self._fields.items()}
        return dict(self._all_attributes)

    def all_attributes_labeled(self, label_name: str) -> dict[str, Any]:
        """Return a mapping of field name to human name for fields carrying ``label_name``."""
        return {descriptor.name: descriptor.human_name() for descriptor in self.all_fields_labeled(label_name)}

    def display_for(self, instance: Any, field_name: str) -> Any:
        """
        Read a field from ``instance`` and format it for display.

        Shorthand for ``field.display_proc()(field.reader_proc()(instance))``.

        Raises:
            FieldNotFoundError: If there is no field called ``field_name``.

        """
        descriptor = self.field_called(field_name)
        if descriptor is None:
            raise FieldNotFoundError(field_name)
        return descriptor.display_proc()(descriptor.reader_proc()(instance))

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        """Return a string representation of the Schema."""
        subject_name = getattr(self._subject_type, "__name__", repr(self._subject_type))
        return f"<Schema subject='{subject_name}' fields={list(self._fields)!r}>"
