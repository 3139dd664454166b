"""Configuration loading and validation."""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field

import yaml

from folderstats.domain.exceptions import ConfigurationError
from folderstats.domain.models import StatsCommandType
from folderstats.shared.logging import get_logger
from folderstats.shared.remote_config import load_config_with_remote

TEXT_SOURCES = ("placeholder", "filesystem")
SINKS = ("memory", "jsonl", "b2")


def _split_list(value: Any) -> List[str]:
    """Accept a list or a comma separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return [str(item) for item in value]


def _split_list_or_enums(value: Any) -> List[Any]:
    if value is None:
        return list(StatsCommandType)
    if isinstance(value, str):
        return _split_list(value)
    return list(value)


@dataclass
class StatsConfig:
    """Configuration for a stats batch run."""

    # Batch
    folders: List[str] = field(default_factory=list)
    commands: List[StatsCommandType] = field(default_factory=lambda: list(StatsCommandType))

    # Text source
    text_source: str = "placeholder"  # 'placeholder', 'filesystem'
    root_dir: Path = Path(".")
    file_pattern: str = "*.txt"

    # Results
    sink: str = "jsonl"  # 'memory', 'jsonl', 'b2'
    results_path: Path = Path("stats_results.jsonl")

    # Commands
    top_n: int = 5

    # B2 settings
    b2_bucket: Optional[str] = None
    b2_endpoint: Optional[str] = None
    b2_key: Optional[str] = None
    b2_secret: Optional[str] = None
    b2_prefix: str = "stats"

    def __post_init__(self):
        """Normalize and validate configuration after initialization."""
        self.folders = _split_list(self.folders)
        self.commands = [StatsCommandType.parse(c) for c in _split_list_or_enums(self.commands)]
        self.root_dir = Path(self.root_dir)
        self.results_path = Path(self.results_path)
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if self.text_source not in TEXT_SOURCES:
            raise ConfigurationError(f"Invalid text_source: {self.text_source}")

        if self.sink not in SINKS:
            raise ConfigurationError(f"Invalid sink: {self.sink}")

        try:
            self.top_n = int(self.top_n)
        except (TypeError, ValueError):
            raise ConfigurationError(f"top_n must be an integer, got: {self.top_n!r}")

        if self.top_n <= 0:
            raise ConfigurationError(f"top_n must be positive, got: {self.top_n}")

        if self.sink == "b2" and not (self.b2_bucket and self.b2_key and self.b2_secret):
            raise ConfigurationError("b2 sink requires b2_bucket, b2_key and b2_secret")


class ConfigLoader:
    """Loads and validates configuration from YAML files and environment variables."""

    VALID_FIELDS = {
        'folders', 'commands', 'text_source', 'root_dir', 'file_pattern',
        'sink', 'results_path', 'top_n',
        'b2_bucket', 'b2_endpoint', 'b2_key', 'b2_secret', 'b2_prefix',
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_path: Optional path to YAML config file
        """
        self.config_path = Path(config_path) if config_path else Path("folderstats.yaml")
        self._logger = get_logger(__name__)

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> StatsConfig:
        """
        Load configuration from file, environment and overrides.

        Precedence, lowest first: YAML file (merged with its config_url),
        environment variables, overrides.

        Returns:
            StatsConfig instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_dict: Dict[str, Any] = {}

        if self.config_path.exists():
            self._logger.info(f"Loading config from {self.config_path}")
            try:
                file_config = load_config_with_remote(self.config_path, logger_instance=self._logger)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(f"Cannot read config {self.config_path}: {e}") from e
            if not isinstance(file_config, dict):
                raise ConfigurationError(f"Config {self.config_path} must be a mapping")
            config_dict.update(file_config)
        else:
            self._logger.debug(f"Config file not found: {self.config_path}")

        config_dict.update(self._load_from_env())

        if overrides:
            for k, v in overrides.items():
                if v is None:
                    continue
                config_dict[k] = v

        unknown = sorted(k for k in config_dict if k not in self.VALID_FIELDS and k != 'config_url')
        if unknown:
            self._logger.warning(f"Ignoring unknown config keys: {unknown}")

        filtered_config = {k: v for k, v in config_dict.items() if k in self.VALID_FIELDS}

        try:
            return StatsConfig(**filtered_config)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}

        if folders := os.getenv("STATS_FOLDERS"):
            env_config["folders"] = _split_list(folders)

        if commands := os.getenv("STATS_COMMANDS"):
            env_config["commands"] = _split_list(commands)

        if text_source := os.getenv("TEXT_SOURCE"):
            env_config["text_source"] = text_source.lower()

        if root_dir := os.getenv("ROOT_DIR"):
            env_config["root_dir"] = Path(root_dir)

        if pattern := os.getenv("FILE_PATTERN"):
            env_config["file_pattern"] = pattern

        if sink := os.getenv("RESULTS_SINK"):
            env_config["sink"] = sink.lower()

        if results_path := os.getenv("RESULTS_PATH"):
            env_config["results_path"] = Path(results_path)

        if top_n := os.getenv("TOP_N"):
            try:
                env_config["top_n"] = int(top_n)
            except ValueError:
                self._logger.warning(f"Invalid TOP_N value: {top_n}")

        if bucket := os.getenv("B2_BUCKET"):
            env_config["b2_bucket"] = bucket

        if endpoint := os.getenv("B2_ENDPOINT"):
            env_config["b2_endpoint"] = endpoint

        if b2_key := os.getenv("B2_KEY"):
            env_config["b2_key"] = b2_key

        if b2_secret := os.getenv("B2_SECRET"):
            env_config["b2_secret"] = b2_secret

        if b2_prefix := os.getenv("B2_PREFIX"):
            env_config["b2_prefix"] = b2_prefix

        return env_config
