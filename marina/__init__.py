"""Mini README: Core package initializer for the marina inventory manager.

This module exposes convenience imports that allow other parts of the
application to access high-level services without needing to know the
exact module structure. Heavier pieces (the store, billing and shell) are
imported from their own subpackages.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
