"""
Configuration module.

Frozen default parameters, YAML-backed per-asset overrides and validation.
"""

from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader, config_from_dict
from .options import config_from_options
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "get_default_config",
    "ConfigLoader",
    "config_from_dict",
    "config_from_options",
    "ConfigValidator",
    "ValidationError",
]
