"""Mini README: Registry of named waypoint sequencing strategies.

Structure:
    * StrategyRegistry - maps strategy identifiers to ``SequencingStrategy``
      classes and instantiates them on demand.

Built-in strategies register themselves on import. Third-party packages can
publish classes under the ``skyroutes.strategies`` entry point group and be
picked up with ``load_plugins``.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type

from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins
from .base import SequencingStrategy

LOGGER = get_logger(__name__)

PLUGIN_GROUP = "skyroutes.strategies"


class StrategyRegistry:
    """Simple registry for mapping strategy identifiers to classes."""

    def __init__(self) -> None:
        self._strategies: Dict[str, Type[SequencingStrategy]] = {}

    def register(self, strategy: Type[SequencingStrategy]) -> Type[SequencingStrategy]:
        """Register a strategy class; returns it so the method works as a decorator."""

        identifier = strategy.strategy_name.lower()
        LOGGER.debug("Registering strategy '%s'", identifier)
        self._strategies[identifier] = strategy
        return strategy

    def available_strategies(self) -> Iterable[str]:
        """Return iterable of strategy identifiers for display."""

        return sorted(self._strategies.keys())

    def create(self, identifier: str) -> SequencingStrategy:
        """Instantiate the strategy matching the identifier."""

        strategy_cls = self._strategies.get(identifier.lower())
        if not strategy_cls:
            raise KeyError(f"Unknown sequencing strategy '{identifier}'")
        return strategy_cls()

    def load_plugins(self, group: str = PLUGIN_GROUP) -> int:
        """Register strategy classes advertised through entry points."""

        registered = 0
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, SequencingStrategy):
                self.register(plugin)
                registered += 1
            else:
                LOGGER.warning("Entry point object %r is not a SequencingStrategy", plugin)
        return registered


REGISTRY = StrategyRegistry()
