"""Vanilla - mutable value records for mapper fixtures."""

__version__ = "0.1.0"

# Core exports
from .core import *
