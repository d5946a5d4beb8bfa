"""Script-defined map formats.

Subpackages
-----------
- :mod:`mapscript.contracts`: Pydantic models and flag types shared across the package
- :mod:`mapscript.core`: the script environment and error types
- :mod:`mapscript.model`: the host tile map model and its script-facing view
- :mod:`mapscript.io`: file access handed to scripts and atomic saving
- :mod:`mapscript.registries`: the format registry service
- :mod:`mapscript.components.formats`: format adapters and filter helpers
- :mod:`mapscript.use_cases`: registration of script formats

Prefer importing from :mod:`mapscript.api`.
"""
