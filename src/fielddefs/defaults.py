"""Built-in trait kinds and the global default chain."""

import datetime
import logging
import numbers
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NamedTuple

from fielddefs.utils import humanize

if TYPE_CHECKING:
    from fielddefs.field import FieldDescriptor
    from fielddefs.plugin import TraitPlugin
    from fielddefs.schema import Schema

logger = logging.getLogger(__name__)

DefaultsCallback = Callable[["Schema"], None]


class ChainSnapshot(NamedTuple):
    """The state of a default chain at one point in time."""

    callbacks: tuple[DefaultsCallback, ...]
    plugin_types: frozenset[type[Any]]


# --- Built-in trait kinds ---


def _display_value(value: Any) -> Any:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (numbers.Number, datetime.date, datetime.time)):
        return value
    if value is None:
        return ""
    return str(value)


def default_display_proc(field: "FieldDescriptor") -> Callable[[Any], Any]:
    """Numbers and dates pass through unchanged, booleans render as `true`/`false`, everything else via ``str``."""
    return _display_value


def default_reader_proc(field: "FieldDescriptor") -> Callable[[Any], Any]:
    """Read the attribute named after the field."""
    field_name = field.name

    def read(instance: Any) -> Any:
        return getattr(instance, field_name)

    return read


def default_writer_proc(field: "FieldDescriptor") -> Callable[[Any, Any], None]:
    """Write the attribute named after the field, which must already exist."""
    field_name = field.name

    def write(instance: Any, value: Any) -> None:
        if not hasattr(type(instance), field_name) and not hasattr(instance, field_name):
            raise AttributeError(f"'{type(instance).__name__}' object has no attribute '{field_name}' to write")
        setattr(instance, field_name, value)

    return write


def default_human_name(field: "FieldDescriptor") -> str:
    """The humanized field name."""
    return humanize(field.name)


def seed_builtin_trait_kinds(schema: "Schema") -> None:
    """Register the trait kinds every schema starts with."""
    schema.default_for_proc_type("display_proc", default_display_proc)
    schema.default_for_proc_type("reader_proc", default_reader_proc)
    schema.default_for_proc_type("writer_proc", default_writer_proc)
    schema.default_for_arg_type("human_name", default_human_name)


# --- Default chain ---


class DefaultChain:
    """
    An ordered list of callbacks replayed against every new schema.

    Callbacks run in registration order, after the built-in trait kinds are
    seeded and before the schema's own declarations. A callback usually
    registers trait kinds::

        @global_defaults.extend
        def order_sql(schema):
            schema.default_for_arg_type(
                "order_sql", lambda field: f"{field.subject_type.table_name}.{field.name}"
            )

    Each schema replays a snapshot taken when it is constructed, so callbacks
    added later never touch schemas that already exist.
    """

    def __init__(self) -> None:
        """Initialize an empty chain."""
        self._callbacks: list[DefaultsCallback] = []
        self._plugin_types: set[type[Any]] = set()

    def extend(self, callback: DefaultsCallback) -> DefaultsCallback:
        """
        Append a callback to the chain.

        Returns the callback unchanged, so this can be used as a decorator.
        """
        if not callable(callback):
            raise TypeError(f"Default chain callbacks must be callable, got {type(callback).__name__}.")
        self._callbacks.append(callback)
        logger.debug(
            "Extended default chain with %s (%d callbacks).",
            getattr(callback, "__qualname__", repr(callback)),
            len(self._callbacks),
        )
        return callback

    def add_plugin(self, plugin: "TraitPlugin") -> bool:
        """
        Let a plugin register its defaults on this chain.

        A plugin type is added at most once per chain.

        Returns:
            True if the plugin was added, False if its type was already present.

        """
        plugin_type = type(plugin)
        if plugin_type in self._plugin_types:
            logger.debug("Plugin %s is already registered on this chain. Skipping.", plugin_type.__name__)
            return False
        logger.info("Adding trait plugin %s.", plugin_type.__name__)
        plugin.register(self)
        self._plugin_types.add(plugin_type)
        return True

    def snapshot(self) -> ChainSnapshot:
        """Return the current callbacks and added plugin types."""
        return ChainSnapshot(tuple(self._callbacks), frozenset(self._plugin_types))

    def restore(self, snapshot: ChainSnapshot) -> None:
        """Return the chain to a previously taken snapshot."""
        self._callbacks = list(snapshot.callbacks)
        self._plugin_types = set(snapshot.plugin_types)
        logger.debug("Restored default chain to %d callbacks.", len(self._callbacks))

    def reset(self) -> None:
        """Remove every callback and forget which plugins were added."""
        count = len(self._callbacks)
        self._callbacks.clear()
        self._plugin_types.clear()
        logger.info("Cleared %d callbacks from the default chain.", count)

    def apply(self, schema: "Schema", snapshot: ChainSnapshot | None = None) -> None:
        """Run the callbacks of ``snapshot`` (default: the current chain) against ``schema``."""
        callbacks = self._callbacks[:] if snapshot is None else snapshot.callbacks
        for callback in callbacks:
            callback(schema)

    def __len__(self) -> int:
        return len(self._callbacks)

    def __repr__(self) -> str:
        return f"<DefaultChain callbacks={len(self._callbacks)}>"


global_defaults = DefaultChain()
"""The process-wide default chain used by every :class:`Schema` unless told otherwise."""


def extend_global_defaults(callback: DefaultsCallback) -> DefaultsCallback:
    """Append ``callback`` to :data:`global_defaults`. Usable as a decorator."""
    return global_defaults.extend(callback)
