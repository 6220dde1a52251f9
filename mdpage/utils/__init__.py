"""App constants and utilities."""

from .constants import (
    APP_NAME,
    BASE_CSS,
    DEFAULT_CONFIG_DIR,
    DEFAULT_EXTENSION_CONFIGS,
    DEFAULT_EXTENSIONS,
    HTML_TEMPLATE,
)

__all__ = [
    "APP_NAME",
    "BASE_CSS",
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_EXTENSION_CONFIGS",
    "HTML_TEMPLATE",
]
