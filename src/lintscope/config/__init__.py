"""Configuration management."""

from lintscope.config.loader import load_config
from lintscope.config.settings import Settings

__all__ = ["Settings", "load_config"]
