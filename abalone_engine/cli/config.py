"""
Configuration management for the abalone-moves CLI.

Handles loading and managing CLI configuration settings from files and environment.
"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class CLIConfig:
    """Manages CLI configuration settings."""

    DEFAULT_CONFIG = {
        # File naming
        'input_suffix': '.input',
        'move_suffix': '.move',
        'board_suffix': '.board',
        'output_dir': None,  # Next to each input file if None

        # Output formatting
        'color_output': True,
        'default_layout': 'standard',

        # CLI behavior
        'verbose': False,
        'quiet': False,
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses default locations.
        """
        self._config = self.DEFAULT_CONFIG.copy()
        self._config_file = config_file or self._find_config_file()
        self._load_config()

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations."""
        config_locations = [
            Path.cwd() / '.abalone-moves.json',
            Path.cwd() / 'abalone-moves.json',
            Path.home() / '.abalone-moves.json',
            Path.home() / '.config' / 'abalone-moves.json',
        ]

        for config_path in config_locations:
            if config_path.exists() and config_path.is_file():
                logger.debug(f"Found config file: {config_path}")
                return str(config_path)

        return None

    def _load_config(self):
        """Load configuration from file and environment variables."""
        if self._config_file and os.path.exists(self._config_file):
            try:
                with open(self._config_file, 'r') as f:
                    file_config = json.load(f)
                    self._config.update(file_config)
                    logger.debug(f"Loaded config from {self._config_file}")
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Failed to load config file {self._config_file}: {e}")

        self._load_env_config()

    def _load_env_config(self):
        """Load configuration from environment variables."""
        env_mappings = {
            'ABALONE_OUTPUT_DIR': 'output_dir',
            'ABALONE_INPUT_SUFFIX': 'input_suffix',
            'ABALONE_MOVE_SUFFIX': 'move_suffix',
            'ABALONE_BOARD_SUFFIX': 'board_suffix',
            'ABALONE_DEFAULT_LAYOUT': 'default_layout',
            'ABALONE_COLOR': 'color_output',
            'ABALONE_VERBOSE': 'verbose',
            'ABALONE_QUIET': 'quiet',
        }

        for env_var, config_key in env_mappings.items():
            env_value = os.environ.get(env_var)
            if env_value is not None:
                if config_key in ['color_output', 'verbose', 'quiet']:
                    self._config[config_key] = env_value.lower() in ('true', '1', 'yes', 'on')
                else:
                    self._config[config_key] = env_value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config[key] = value

    def update(self, updates: Dict[str, Any]):
        """Update configuration with multiple values."""
        self._config.update(updates)

    def to_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary."""
        return self._config.copy()

    def __repr__(self):
        return f"CLIConfig(config_file={self._config_file})"


# Global configuration instance
_config = None

def get_config() -> CLIConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = CLIConfig()
    return _config

def set_config(config: CLIConfig):
    """Set global configuration instance."""
    global _config
    _config = config
