"""Use-cases (orchestration over components and registries)."""

from .registration import ScriptFormatModule

__all__ = ["ScriptFormatModule"]
