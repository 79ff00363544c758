"""
Centralized configuration management for the eztv scraper.
Combines settings from .env, config.json, and environment variables.
"""

import os
import json
import logging
from typing import Dict, Any, Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


def _merge_into(target: Dict, overrides: Dict) -> None:
    """Recursively copy overrides into target; sections missing from overrides stay untouched."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge_into(target[key], value)
        else:
            target[key] = value


class ConfigManager:
    """Centralized configuration manager for the eztv scraper."""

    def __init__(self, config_file: str = "config.json", env_file: Optional[str] = ".env"):
        """
        Initialize the configuration manager.

        Args:
            config_file (str): Path to the config.json file
            env_file (str): Path to the .env file, None to skip it
        """
        # Load environment variables
        if env_file:
            load_dotenv(env_file)

        # Initialize config
        self.config = {
            # Default values
            "scraper": {
                "base_url": "https://eztv.ag",
                "showlist_path": "/showlist/",
                "timeout": 10.0,
                "user_agent": DEFAULT_USER_AGENT,
                "parser": "html.parser"
            },
            "server": {
                "port": 5000,
                "debug": False,
                "host": "127.0.0.1"
            },
            "logging": {
                "level": "INFO"
            }
        }

        # Load config from file
        self._load_config_file(config_file)

        # Override with environment variables
        self._load_env_variables()

        self._log_config()

    def _load_config_file(self, config_file: str) -> None:
        """
        Load configuration from JSON file.

        Args:
            config_file (str): Path to the config file
        """
        try:
            if os.path.exists(config_file):
                with open(config_file, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)

                # Update config with file values
                _merge_into(self.config, file_config)
                logger.info(f"Loaded configuration from {config_file}")
            else:
                logger.debug(f"Config file {config_file} not found, using defaults")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading config file: {str(e)}")

    def _load_env_variables(self) -> None:
        """Load configuration from environment variables."""
        # Scraper settings
        if os.getenv('EZTV_BASE_URL'):
            self.config['scraper']['base_url'] = os.getenv('EZTV_BASE_URL').rstrip('/')

        if os.getenv('EZTV_SHOWLIST_PATH'):
            self.config['scraper']['showlist_path'] = os.getenv('EZTV_SHOWLIST_PATH')

        if os.getenv('EZTV_TIMEOUT'):
            try:
                self.config['scraper']['timeout'] = float(os.getenv('EZTV_TIMEOUT'))
            except ValueError:
                logger.warning("Invalid EZTV_TIMEOUT value, using default")

        if os.getenv('EZTV_USER_AGENT'):
            self.config['scraper']['user_agent'] = os.getenv('EZTV_USER_AGENT')

        # Server settings
        if os.getenv('FLASK_HOST'):
            self.config['server']['host'] = os.getenv('FLASK_HOST')

        if os.getenv('FLASK_PORT'):
            try:
                self.config['server']['port'] = int(os.getenv('FLASK_PORT'))
            except ValueError:
                logger.warning("Invalid FLASK_PORT value, using default")

        if os.getenv('FLASK_DEBUG'):
            self.config['server']['debug'] = os.getenv('FLASK_DEBUG').lower() in ('true', '1', 't')

        if os.getenv('LOG_LEVEL'):
            self.config['logging']['level'] = os.getenv('LOG_LEVEL').upper()

    def _log_config(self) -> None:
        logger.debug(f"Current configuration: {json.dumps(self.config, indent=2)}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a value by dotted key, e.g. "scraper.timeout".

        Returns default when a segment is missing or the path runs into a non-dict value.
        """
        node: Any = self.config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        """Store value under a dotted key, creating missing sections."""
        *sections, leaf = key.split('.')
        node = self.config
        for part in sections:
            node = node.setdefault(part, {})
        node[leaf] = value

    def save(self, config_file: str = "config.json") -> bool:
        """
        Save the current configuration to a file.

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            with open(config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=4)
            logger.info(f"Configuration saved to {config_file}")
            return True
        except OSError as e:
            logger.error(f"Error saving configuration: {str(e)}")
            return False


# Singleton instance
_config_manager = None


def get_config() -> ConfigManager:
    """
    Get the singleton ConfigManager instance.

    Returns:
        ConfigManager: The configuration manager instance
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def reset_config() -> None:
    """Drop the cached instance so the next get_config() reloads."""
    global _config_manager
    _config_manager = None
