"""Trait plugin protocol."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fielddefs.defaults import DefaultChain

PLUGIN_ENTRY_POINT_GROUP = "fielddefs.plugins"


class TraitPlugin(Protocol):
    """
    A protocol for packages that contribute trait kinds to every schema.

    Plugins are advertised in the ``fielddefs.plugins`` entry-point group and
    installed with :func:`fielddefs.plugin_loader.install_plugins`.
    """

    def register(self, chain: "DefaultChain") -> None:
        """
        Extend the chain with the plugin's trait kinds.

        Args:
            chain: The default chain to extend.

        """
        ...
