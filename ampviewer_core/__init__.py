"""Canonical re-exports for the viewer configuration core.

Hosts validate their configuration with ``validate_config`` before handing
it to the rendering and proxying components.
"""

from .config import (
    ConfigLoadError,
    ConfigValidator,
    ValidationError,
    ViewerConfig,
    ViewerConfigError,
    load_config,
    validate_config,
)

__version__ = "0.1.0"

__all__ = [
    "ViewerConfig",
    "ConfigValidator",
    "ValidationError",
    "validate_config",
    "load_config",
    "ConfigLoadError",
    "ViewerConfigError",
    "__version__",
]
