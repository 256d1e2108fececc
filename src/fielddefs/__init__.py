"""Extensible field definitions: named fields carrying pluggable traits."""

from fielddefs.config import FieldDefsSettings, get_settings, load_settings, reset_settings
from fielddefs.defaults import ChainSnapshot, DefaultChain, extend_global_defaults, global_defaults
from fielddefs.exceptions import (
    FieldDefsError,
    FieldNotFoundError,
    MissingProviderError,
    PluginLoadError,
    RegistrationConflictError,
    UnknownTraitKindError,
)
from fielddefs.field import FieldDescriptor
from fielddefs.logging_config import setup_logging
from fielddefs.plugin import TraitPlugin
from fielddefs.plugin_loader import install_plugins
from fielddefs.schema import Schema
from fielddefs.traits import ARG, TraitCategory, TraitKind, TraitKindRegistry

__all__ = [
    "ARG",
    "ChainSnapshot",
    "DefaultChain",
    "FieldDefsError",
    "FieldDefsSettings",
    "FieldDescriptor",
    "FieldNotFoundError",
    "MissingProviderError",
    "PluginLoadError",
    "RegistrationConflictError",
    "Schema",
    "TraitCategory",
    "TraitKind",
    "TraitKindRegistry",
    "TraitPlugin",
    "UnknownTraitKindError",
    "extend_global_defaults",
    "get_settings",
    "global_defaults",
    "install_plugins",
    "load_settings",
    "reset_settings",
    "setup_logging",
]
