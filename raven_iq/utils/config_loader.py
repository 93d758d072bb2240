"""
Configuration Management System for Raven-IQ.

This module provides centralized configuration management for the matrix puzzle
exam. It loads parameters from raven_config.txt with type-safe parsing and
default values for every tunable used by the generator, the scorer and the
session orchestrator.

Key Features:
- Type-safe parameter parsing (string, int, float, bool)
- Hierarchical configuration: Config file → Defaults
- Global config singleton via get_config()
- Automatic project root detection

The configuration system supports:
- Session settings (puzzles per level, pass ratio)
- Level validation policy (lenient fallback or strict rejection)
- Reproducible puzzle generation (random seed)
- Progress storage location
"""

import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

logger = logging.getLogger(__name__)

__all__ = ["ConfigLoader", "get_config", "reload_config"]


class ConfigLoader:
    """
    Loads and manages configuration parameters for the exam.

    Provides type-safe access to configuration values with defaults.
    """

    def __init__(self, config_file: str = "raven_config.txt"):
        """
        Initialize configuration loader.

        Args:
            config_file: Path to configuration file relative to project root
        """
        self.config_file = config_file
        self.config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self):
        """Load configuration from file."""
        current_path = Path(__file__).parent
        config_path = None

        # Search up the directory tree
        for _ in range(5):
            potential_path = current_path / self.config_file
            if potential_path.exists():
                config_path = potential_path
                break
            current_path = current_path.parent

        if config_path is None:
            logger.warning(f"Config file {self.config_file} not found, using defaults")
            self._load_defaults()
            return

        logger.info(f"Loading configuration from {config_path}")

        self._load_defaults()
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    line = line.strip()

                    if not line or line.startswith("#"):
                        continue

                    if "=" not in line:
                        logger.warning(f"Invalid config line {line_num}: {line}")
                        continue

                    key, value = line.split("=", 1)
                    self.config[key.strip()] = self._parse_value(value.strip())

            logger.info(f"Loaded {len(self.config)} configuration parameters")

        except Exception as e:
            logger.error(f"Failed to load config: {e}")
            self._load_defaults()

    def _parse_value(self, value: str) -> Union[str, int, float, bool]:
        """Parse string value to appropriate Python type."""
        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        if value and value.replace(".", "").replace("-", "").isdigit():
            if "." in value:
                return float(value)
            else:
                return int(value)

        return value

    def _load_defaults(self):
        """Load default configuration values."""
        self.config = {
            # Session
            "PUZZLES_PER_LEVEL": 5,
            "LEVEL_PASS_RATIO": 0.6,
            # Generation
            "STRICT_LEVEL_VALIDATION": False,
            "RANDOM_SEED": "",
            # Storage
            "PROGRESS_STORE_PATH": "",
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration parameter name
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self.config.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value."""
        value = self.get(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid integer value for {key}: {value}")
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get float configuration value."""
        value = self.get(key, default)
        try:
            return float(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid float value for {key}: {value}")
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return default

    def get_string(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_optional_int(self, key: str) -> Optional[int]:
        """Get integer configuration value, or None when the key is blank."""
        value = self.get(key)
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid integer value for {key}: {value}")
            return None

    def get_session_config(self) -> Dict[str, Any]:
        """Get session and generation configuration parameters."""
        return {
            "puzzles_per_level": self.get_int("PUZZLES_PER_LEVEL", 5),
            "level_pass_ratio": self.get_float("LEVEL_PASS_RATIO", 0.6),
            "strict_level_validation": self.get_bool(
                "STRICT_LEVEL_VALIDATION", False
            ),
            "random_seed": self.get_optional_int("RANDOM_SEED"),
            "progress_store_path": self.get_string("PROGRESS_STORE_PATH", ""),
        }


# Global configuration instance
_config = None


def get_config() -> ConfigLoader:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = ConfigLoader()
    return _config


def reload_config():
    """Reload configuration from file."""
    global _config
    _config = ConfigLoader()
    return _config
