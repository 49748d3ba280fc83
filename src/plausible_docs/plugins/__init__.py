"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Broken plugins are warnings at discovery time. Errors raised
while a hook runs propagate to the build.
"""

from plausible_docs.plugins.manager import PluginManager

__all__ = ["PluginManager"]
