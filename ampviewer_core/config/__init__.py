"""Viewer configuration schema, validation and loading."""

from .loader import ConfigLoadError, ViewerConfigError, load_config
from .schema import OPTIONAL_FIELDS, REQUIRED_FIELDS, ViewerConfig
from .urls import is_valid_url, is_valid_url_with_placeholder
from .validator import ConfigValidator, Rule, ValidationError, validate_config

__all__ = [
    "ViewerConfig",
    "REQUIRED_FIELDS",
    "OPTIONAL_FIELDS",
    "ConfigValidator",
    "Rule",
    "ValidationError",
    "validate_config",
    "is_valid_url",
    "is_valid_url_with_placeholder",
    "load_config",
    "ConfigLoadError",
    "ViewerConfigError",
]
