"""Configuration file loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from lintscope.config.settings import Settings
from lintscope.errors import ConfigError
from lintscope.models import Category, Language, Severity

CONFIG_FILENAMES = [".lintscope.yaml", ".lintscope.yml", "lintscope.yaml", "lintscope.yml"]


def _find_config_file(config_path: Path | None = None) -> Path | None:
  """Find config file path, or None if no config exists."""
  if config_path:
    return config_path

  for filename in CONFIG_FILENAMES:
    path = Path.cwd() / filename
    if path.exists():
      return path

  return None


def load_config(config_path: Path | None = None) -> Settings:
  """Load configuration from file or defaults."""
  path = _find_config_file(config_path)
  if path:
    return _load_from_file(path)
  return Settings()


def _load_from_file(path: Path) -> Settings:
  """Load settings from a YAML file."""
  if not path.exists():
    raise ConfigError(f"Config file not found: {path}")

  try:
    with open(path) as f:
      data = yaml.safe_load(f) or {}
  except yaml.YAMLError as e:
    raise ConfigError(f"Invalid YAML in {path}: {e}") from e

  if not isinstance(data, dict):
    raise ConfigError(f"Config file {path} must contain a mapping")

  return _parse_config(data)


def _parse_config(data: dict) -> Settings:
  """Parse config dict into Settings."""
  try:
    if data.get("language"):
      data["language"] = Language.parse(data["language"])

    if "severities" in data:
      data["severities"] = [Severity(s) for s in data["severities"]]

    if "categories" in data:
      data["categories"] = [Category(c) for c in data["categories"]]

    return Settings(**data)
  except (ValueError, ValidationError) as e:
    raise ConfigError(f"Invalid configuration: {e}") from e
