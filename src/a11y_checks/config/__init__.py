"""
Configuration module for rule thresholds.
"""

from .check_config import (
    DEFAULT_CONFIG,
    CheckConfig,
    ItemLabel,
    config_from_dict,
    create_custom_config,
    get_check_config,
    load_check_config,
)

__all__ = [
    "CheckConfig",
    "ItemLabel",
    "DEFAULT_CONFIG",
    "get_check_config",
    "config_from_dict",
    "load_check_config",
    "create_custom_config",
]
