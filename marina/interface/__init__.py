"""Mini README: Interactive interfaces for the marina manager.

Exports the menu-driven shell used by the command line entry point.
"""

from .shell import MarinaShell, format_boat

__all__ = ["MarinaShell", "format_boat"]
