"""YAML config loading and validation."""

import yaml
from pydantic import ValidationError
from pathlib import Path
from typing import Optional, Union

from ..core.errors import ConfigLoadError
from .schema import SplitterConfig


def _build_config(data, origin: str, base_dir: Optional[Path] = None) -> SplitterConfig:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"{origin} must contain a YAML mapping, got {type(data)}")

    try:
        config = SplitterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Config validation failed: {e}")

    # Relative prefix files are relative to the config file
    if base_dir is not None and config.prefix_file:
        prefix_path = Path(config.prefix_file)
        if not prefix_path.is_absolute():
            config = config.model_copy(update={"prefix_file": str(base_dir / prefix_path)})

    issues = config.validate_settings()
    if issues:
        raise ConfigLoadError(f"Config validation issues: {'; '.join(issues)}")

    return config


def load_config(path: Union[str, Path]) -> SplitterConfig:
    """
    Load and validate a splitter config from YAML file.

    Args:
        path: Path to YAML config file

    Returns:
        SplitterConfig: Validated config object

    Raises:
        ConfigLoadError: If file cannot be read or config is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")

    return _build_config(data, f"Config file {path}", base_dir=path.parent)


def load_config_from_string(yaml_content: str) -> SplitterConfig:
    """
    Load and validate a splitter config from YAML string.

    Raises:
        ConfigLoadError: If YAML is invalid or config validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")

    return _build_config(data, "Config content")
