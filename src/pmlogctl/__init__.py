"""pmlogctl - logging context control.

Lists logging contexts, changes their levels, and emits plain,
structured and kernel log records.
"""

from pmlogctl._version import __version__, __app_name__

__all__ = ["__version__", "__app_name__"]
