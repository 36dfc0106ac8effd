"""Default configuration values for Styled Variants."""

from .config import StyleSystemConfig

DEFAULT_CONFIG = StyleSystemConfig()


def create_default_config(**overrides) -> StyleSystemConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        StyleSystemConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            variable_prefix="app",
            default_theme="dark"
        )
    """
    return StyleSystemConfig(**overrides)
