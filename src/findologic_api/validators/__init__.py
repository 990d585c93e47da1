"""Configuration validation."""

from .config_validator import RULES, ConfigValidator

__all__ = [
    "RULES",
    "ConfigValidator",
]
