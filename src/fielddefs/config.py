"""Settings for the fielddefs framework, read from the environment and `pyproject.toml`."""

from pathlib import Path
from typing import Any

import tomli
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FieldDefsSettings(BaseSettings):
    """
    Framework-wide settings.

    Values come from ``FIELDDEFS_*`` environment variables and from the
    ``[tool.fielddefs]`` table of the nearest ``pyproject.toml`` (see
    :func:`load_settings`). Environment variables win over the file.
    """

    model_config = SettingsConfigDict(env_prefix="FIELDDEFS_", extra="forbid")

    log_level: str = "WARNING"
    """Level for the ``fielddefs`` logger when :func:`setup_logging` is called without one."""

    strict_providers: bool = False
    """Raise MissingProviderError instead of returning None for traits without a provider."""

    plugins: list[str] | None = None
    """Entry-point names of the trait plugins to install. ``None`` installs every discovered plugin."""

    strict_plugins: bool = False
    """Raise PluginLoadError instead of logging and skipping plugins that fail to load."""

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Upper-case level names so `debug` and `DEBUG` are equivalent."""
        if isinstance(value, str):
            return value.upper()
        return value


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find the nearest `pyproject.toml`, searching upward from ``start_dir``."""
    search_dir = (start_dir or Path.cwd()).resolve()
    while True:
        p = search_dir / "pyproject.toml"
        if p.is_file():
            return p
        if search_dir == search_dir.parent:
            return None
        search_dir = search_dir.parent


def load_tool_config(start_dir: Path | None = None) -> dict[str, Any]:
    """
    Read the ``[tool.fielddefs]`` table from the nearest `pyproject.toml`.

    Returns:
        The table's contents, or an empty dict if there is no file or table.

    """
    pyproject_path = find_pyproject_toml(start_dir)
    if not pyproject_path:
        return {}

    with pyproject_path.open("rb") as f:
        pyproject_data = tomli.load(f)

    return dict(pyproject_data.get("tool", {}).get("fielddefs", {}))


def load_settings(start_dir: Path | None = None) -> FieldDefsSettings:
    """
    Build settings from `pyproject.toml` and the environment.

    Args:
        start_dir: Where to start searching for `pyproject.toml`. Defaults to
            the current working directory.

    Returns:
        The validated settings.

    """
    env_settings = FieldDefsSettings()
    data = load_tool_config(start_dir)
    data.update(env_settings.model_dump(exclude_unset=True))
    return FieldDefsSettings.model_validate(data)


_settings_cache: FieldDefsSettings | None = None


def get_settings() -> FieldDefsSettings:
    """Get the cached settings, loading them on first use."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def reset_settings() -> None:
    """Forget the cached settings so the next :func:`get_settings` reloads them."""
    global _settings_cache
    _settings_cache = None
