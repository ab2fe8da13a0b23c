"""Configuration loading utilities."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    return config


@dataclass(frozen=True)
class CheckerConfig:
    """Table sizes and policy for a password checker.

    Attributes:
        chain_buckets: Bucket count of the chaining tables
        probe_capacity: Slot count of the linear probing tables
        min_length: Minimum password length
        log_level: Logging level name
    """

    chain_buckets: int = 1000
    probe_capacity: int = 20000
    min_length: int = 8
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.chain_buckets <= 0:
            raise ValueError("chain_buckets must be positive")
        if self.probe_capacity <= 0:
            raise ValueError("probe_capacity must be positive")
        if self.min_length <= 0:
            raise ValueError("min_length must be positive")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {list(LOG_LEVELS)}, got {self.log_level}"
            )

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "CheckerConfig":
        """Build a config from a plain dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        return cls(**config)

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "CheckerConfig":
        """Load and validate a YAML config file."""
        return cls.from_dict(load_config(config_path))
