"""Configuration loading and validation bridges for fielderrors.

Main components:
- ConfigLoader (``fielderrors.config.loader``): load converter settings from YAML
- report_from_pydantic (``fielderrors.config.validator``): adapt pydantic errors
- Default values (``fielderrors.config.defaults``)

Submodules are imported directly; this package re-exports nothing.
"""
