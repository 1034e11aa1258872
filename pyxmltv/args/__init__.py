"""
pyxmltv.args - Command line argument parsing module

Provides argument parsing and validation for the pyxmltv converter.
"""

from .base import ArgumentParser
from .validator import ArgumentValidator

# Primary export
__all__ = [
    "ArgumentParser",      # Main public interface
    "ArgumentValidator",   # For testing/validation
]
