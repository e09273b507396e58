"""Mini README: Built-in sequencing strategies.

New strategies subclass ``SequencingStrategy`` and call
``REGISTRY.register`` at import time to become selectable by name.
"""

from .nearest_waypoint import NearestWaypointStrategy

__all__ = ["NearestWaypointStrategy"]
