"""Utility functions for discovering and installing trait plugins."""

import importlib.metadata
import logging

from fielddefs.config import FieldDefsSettings, get_settings
from fielddefs.defaults import DefaultChain, global_defaults
from fielddefs.exceptions import PluginLoadError
from fielddefs.plugin import PLUGIN_ENTRY_POINT_GROUP, TraitPlugin

logger = logging.getLogger(__name__)


def _fail(plugin_name: str, error: Exception, strict: bool) -> None:
    if strict:
        raise PluginLoadError(f"Could not load plugin '{plugin_name}'.", plugin_name, error) from error
    logger.warning("Could not load plugin '%s'. Reason: %s.", plugin_name, error)


def load_plugin(plugin_name: str, strict: bool = False) -> TraitPlugin | None:
    """
    Load a plugin instance by its entry-point name.

    Returns:
        The plugin instance, or None if it is unknown or failed to load and
        ``strict`` is False.

    Raises:
        PluginLoadError: If ``strict`` is True and the plugin is unknown or fails to load.

    """
    eps = importlib.metadata.entry_points(group=PLUGIN_ENTRY_POINT_GROUP, name=plugin_name)
    try:
        ep = next(iter(eps))
    except StopIteration:
        _fail(plugin_name, LookupError(f"no entry point named '{plugin_name}'"), strict)
        return None

    try:
        plugin = ep.load()()
    except Exception as e:
        _fail(plugin_name, e, strict)
        return None
    logger.info("Loaded plugin '%s'.", plugin_name)
    return plugin


def get_all_plugins(enabled_plugins: list[str] | None = None, strict: bool = False) -> dict[str, TraitPlugin]:
    """
    Load and return a dictionary of plugins.

    If `enabled_plugins` is provided, only plugins from that list will be loaded.
    Otherwise, all discoverable plugins will be loaded.
    """
    plugins: dict[str, TraitPlugin] = {}
    eps = importlib.metadata.entry_points(group=PLUGIN_ENTRY_POINT_GROUP)
    for ep in eps:
        if enabled_plugins is not None and ep.name not in enabled_plugins:
            continue
        try:
            plugins[ep.name] = ep.load()()
        except Exception as e:
            _fail(ep.name, e, strict)
            continue
        logger.info("Loaded plugin '%s'.", ep.name)

    if enabled_plugins is not None:
        for missing in sorted(set(enabled_plugins) - {ep.name for ep in eps}):
            _fail(missing, LookupError(f"no entry point named '{missing}'"), strict)
    return plugins


def install_plugins(
    chain: DefaultChain | None = None, settings: FieldDefsSettings | None = None
) -> list[str]:
    """
    Discover the configured plugins and add them to a default chain.

    Args:
        chain: The chain to extend. Defaults to the global chain.
        settings: Which plugins to load and how strictly. Defaults to :func:`get_settings`.

    Returns:
        The names of the plugins that were newly added to the chain.

    """
    settings = settings if settings is not None else get_settings()
    chain = global_defaults if chain is None else chain

    installed: list[str] = []
    for name, plugin in get_all_plugins(settings.plugins, strict=settings.strict_plugins).items():
        snapshot = chain.snapshot()
        try:
            added = chain.add_plugin(plugin)
        except Exception as e:
            chain.restore(snapshot)
            _fail(name, e, settings.strict_plugins)
            continue
        if added:
            installed.append(name)
    logger.info("Installed %d trait plugins.", len(installed))
    return installed
