"""
Remote config loader utility.

Handles downloading and merging remote configuration from config_url.
"""

import logging
from typing import Dict, Any, Optional
from pathlib import Path

import requests
import yaml


logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge override dict into base dict.

    Args:
        base: Base configuration
        override: Configuration to merge in (overrides base)

    Returns:
        Merged configuration
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def download_remote_config(
    config_url: str,
    timeout: int = 10,
    logger_instance: Optional[logging.Logger] = None
) -> Optional[Dict[str, Any]]:
    """
    Download and parse remote configuration from URL.

    Args:
        config_url: URL to download config from
        timeout: Request timeout in seconds
        logger_instance: Optional logger to use

    Returns:
        Parsed config dict, or None if failed
    """
    log = logger_instance or logger

    if not config_url:
        return None

    try:
        log.info(f"Downloading remote config: {config_url}")
        response = requests.get(config_url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        log.error(f"Failed to download remote config: {e}")
        return None

    # JSON first, then YAML
    try:
        remote_config = response.json()
    except ValueError:
        try:
            remote_config = yaml.safe_load(response.text)
        except yaml.YAMLError as e:
            log.error(f"Remote config is neither JSON nor YAML: {e}")
            return None

    if not isinstance(remote_config, dict):
        log.warning("Remote config is not a mapping, ignoring")
        return None

    return remote_config


def load_config_with_remote(
    config_path: Path,
    logger_instance: Optional[logging.Logger] = None
) -> Dict[str, Any]:
    """
    Load config from YAML file and merge with remote config if config_url is set.

    Args:
        config_path: Path to the YAML config
        logger_instance: Optional logger to use

    Returns:
        Merged configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    log = logger_instance or logger

    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        return config

    config_url = str(config.get('config_url') or '').strip()
    if not config_url:
        return config

    remote_config = download_remote_config(config_url, logger_instance=log)
    if not remote_config:
        log.warning("Continuing with local config only")
        return config

    merged = deep_merge(config, remote_config)
    log.info(f"Remote config merged: {list(remote_config.keys())}")
    return merged
