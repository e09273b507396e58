"""Mini README: Utility helper functions for SkyRoutes.

Currently exports the entry point loader used to discover third-party
sequencing strategies.
"""

from .plugin_loader import load_entry_point_plugins

__all__ = ["load_entry_point_plugins"]
