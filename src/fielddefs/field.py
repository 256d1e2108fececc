"""The field descriptor: per-field labels and trait overrides."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from fielddefs.exceptions import UnknownTraitKindError
from fielddefs.traits.accessors import ACCESSOR_CLASSES, TraitAccessor

if TYPE_CHECKING:
    from fielddefs.schema import Schema

BUILTIN_TRAIT_METHODS = frozenset({"display_proc", "reader_proc", "writer_proc", "human_name"})


class FieldDescriptor:
    """
    Metadata for one named field of a schema's subject type.

    A descriptor holds a set of labels and, for every trait kind registered on
    its schema, an optional override. Traits are reached through
    :meth:`trait` or as attributes named after the trait kind::

        field.display_proc(lambda age: f"{age} years old").human_name("Age")
        field.human_name()          # -> "Age"
        field.trait("order_sql")()  # same as field.order_sql()

    Descriptors are created by :meth:`Schema.field` and belong to exactly one
    schema.
    """

    def __init__(self, name: str, schema: "Schema") -> None:
        """Initialize the descriptor for ``name`` within ``schema``."""
        self._name = name
        self._schema = schema
        self._labels: set[str] = set()
        self._overrides: dict[str, Any] = {}

    @property
    def name(self) -> str:
        """The field name."""
        return self._name

    @property
    def schema(self) -> "Schema":
        """The schema this field belongs to."""
        return self._schema

    @property
    def subject_type(self) -> Any:
        """The subject type of the owning schema."""
        return self._schema.subject_type

    @property
    def labels(self) -> frozenset[str]:
        """The labels applied to this field."""
        return frozenset(self._labels)

    def label(self, label_name: str) -> "FieldDescriptor":
        """
        Apply a label to this field.

        Labelled fields can be found with :meth:`Schema.all_fields_labeled`
        and :meth:`Schema.all_attributes_labeled`. Applying the same label
        twice has no further effect.

        Returns:
            This descriptor, for chaining.

        """
        self._labels.add(str(label_name))
        return self

    def has_label(self, label_name: str) -> bool:
        """Return True if this field carries the label."""
        return str(label_name) in self._labels

    def trait(self, trait_name: str) -> TraitAccessor:
        """
        Return the accessor for a trait kind bound to this field.

        Raises:
            UnknownTraitKindError: If the schema has no such trait kind.

        """
        kind = self._schema.trait_kinds.kind(trait_name)
        return ACCESSOR_CLASSES[kind.category](self, kind)

    def has_override(self, trait_name: str) -> bool:
        """Return True if this field stores its own value for the trait."""
        return trait_name in self._overrides

    def clear_override(self, trait_name: str) -> "FieldDescriptor":
        """Drop this field's override so the trait falls back to its provider."""
        self._overrides.pop(trait_name, None)
        return self

    # Built-in trait kinds, spelled out for readability and tooling.

    def display_proc(self, func: Callable[[Any], Any] | None = None) -> Any:
        """
        Get or set the callable that formats a value of this field for display.

        Called with a callable, stores it and returns this descriptor. Called
        without arguments, returns the stored callable or the default, which
        leaves numbers and dates untouched and renders everything else with
        ``str``.
        """
        return self.trait("display_proc")(func)

    def reader_proc(self, func: Callable[[Any], Any] | None = None) -> Any:
        """
        Get or set the callable that reads this field from a subject instance.

        The default reads the attribute named after the field.
        """
        return self.trait("reader_proc")(func)

    def writer_proc(self, func: Callable[[Any, Any], Any] | None = None) -> Any:
        """
        Get or set the callable that writes a value of this field into a subject instance.

        The callable takes the instance and the value. The default sets the
        attribute named after the field.
        """
        return self.trait("writer_proc")(func)

    def human_name(self, *args: Any) -> Any:
        """
        Get or set the name of this field as shown to end users.

        The default is the humanized field name.
        """
        return self.trait("human_name")(*args)

    def __getattr__(self, name: str) -> TraitAccessor:
        """Resolve schema-registered trait kinds as accessor attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.trait(name)
        except UnknownTraitKindError:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute or trait kind '{name}'"
            ) from None

    def __repr__(self) -> str:
        """Return a string representation of the field descriptor."""
        return f"<FieldDescriptor name='{self._name}' labels={sorted(self._labels)!r}>"


def reserved_trait_names() -> frozenset[str]:
    """Names a trait kind may not take because the descriptor already defines them."""
    return frozenset(name for name in dir(FieldDescriptor) if not name.startswith("_")) - BUILTIN_TRAIT_METHODS
