"""Custom exceptions for the fielddefs framework."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fielddefs.traits.category import TraitCategory


class FieldDefsError(Exception):
    """Base class for exceptions raised by the fielddefs framework."""

    pass


class FieldNotFoundError(FieldDefsError, LookupError):
    """Raised when a field name has no descriptor in a schema."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Field called '{field_name}' not found.")
        self.field_name = field_name


class UnknownTraitKindError(FieldDefsError, LookupError):
    """Raised when a trait kind is not registered on a schema."""

    def __init__(self, trait_name: str) -> None:
        super().__init__(f"Trait kind '{trait_name}' is not registered.")
        self.trait_name = trait_name


class RegistrationConflictError(FieldDefsError):
    """Raised when a trait kind registration clashes with an existing one."""

    def __init__(
        self,
        message: str,
        trait_name: str,
        existing: "TraitCategory | None" = None,
        requested: "TraitCategory | None" = None,
    ) -> None:
        super().__init__(message)
        self.trait_name = trait_name
        self.existing = existing
        self.requested = requested

    def __str__(self) -> str:
        base_str = super().__str__()
        if self.existing is None or self.requested is None:
            return base_str
        return f"{base_str} (Trait: {self.trait_name}, Existing: {self.existing.name}, Requested: {self.requested.name})"


class MissingProviderError(FieldDefsError):
    """Raised in strict mode when an unoverridden trait has no default provider."""

    def __init__(self, trait_name: str, field_name: str) -> None:
        super().__init__(f"Trait kind '{trait_name}' has no default provider (field '{field_name}').")
        self.trait_name = trait_name
        self.field_name = field_name


class PluginLoadError(FieldDefsError):
    """Raised when a trait plugin cannot be loaded and strict plugin loading is enabled."""

    def __init__(
        self,
        message: str,
        plugin_name: str,
        original_exception: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.plugin_name = plugin_name
        self.original_exception = original_exception

    def __str__(self) -> str:
        base_str = super().__str__()
        details = f"Plugin: {self.plugin_name}"
        if self.original_exception:
            details += f", Original Error: {type(self.original_exception).__name__}: {self.original_exception}"
        return f"{base_str} ({details})"
