"""INI-backed configuration and version lookup."""

from .app_config import AppConfig, build_app_config
from .ini_config_service import IniConfigService

__all__ = ["AppConfig", "IniConfigService", "build_app_config"]
