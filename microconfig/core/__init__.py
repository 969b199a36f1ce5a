"""
Core module for microconfig.

This module provides the foundational components used throughout the package:
- Exception classes organized by concern
"""

# Import all exceptions for easy access
from .exceptions import *

__all__ = []

# Extend __all__ with imported items
from .exceptions import __all__ as exceptions_all

__all__.extend(exceptions_all)
