"""Mini README: Multi-stop itinerary planning subsystem.

The package is divided into ``base`` for the result type and strategy
interface, ``registry`` for strategy lookup, ``strategies`` for concrete
sequencing approaches and ``planner`` for the ``plan_itinerary`` entry point.
"""

from .base import ItineraryResult, SequencingStrategy
from .registry import REGISTRY, StrategyRegistry
from . import strategies  # noqa: F401  # ensure built-in strategies register on import
from .planner import DEFAULT_STRATEGY, plan_itinerary

__all__ = [
    "DEFAULT_STRATEGY",
    "ItineraryResult",
    "REGISTRY",
    "SequencingStrategy",
    "StrategyRegistry",
    "plan_itinerary",
]
