"""
goswitch CLI module.

This module provides the command-line interface for goswitch.
"""

from .parser import CLI, main
from . import utils

__all__ = ["CLI", "main", "utils"]
