"""Registries.

- :class:`Registry`: generic ordered key/value registry
- :class:`FormatRegistry`: the host's set of available map formats
"""

from .base import Registry
from .formats import FormatRegistry

__all__ = ["Registry", "FormatRegistry"]
