"""Configuration management for Styled Variants."""

from .config import StyleSystemConfig
from .defaults import DEFAULT_CONFIG, create_default_config

__all__ = ["StyleSystemConfig", "DEFAULT_CONFIG", "create_default_config"]
