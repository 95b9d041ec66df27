"""
Configuration loader
"""
import logging
import os
from pathlib import Path

import yaml

from scorekeeper.models import AppConfig


logger = logging.getLogger(__name__)

VERSION = "1.0.0"

DEFAULT_CONFIG_PATH = "config/scorekeeper.yaml"
CONFIG_ENV_VAR = "SCOREKEEPER_CONFIG"


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> AppConfig:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to config file

    Returns:
        AppConfig object

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return AppConfig(**data)


def resolve_config() -> AppConfig:
    """
    Load the config named by $SCOREKEEPER_CONFIG (or the default path),
    falling back to built-in defaults when no file is present
    """
    config_path = os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        logger.warning(f"⚠️ {config_path} not found, using default configuration")
        return AppConfig()
    logger.info(f"✅ Loaded configuration from {config_path}")
    return config
