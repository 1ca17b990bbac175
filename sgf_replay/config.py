"""Configuration management for SGF replay sessions."""

from __future__ import annotations

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from .board import Color

logger = logging.getLogger(__name__)


class ReplayConfig:
    """Sectioned configuration backed by an optional JSON file."""

    DEFAULT_CONFIG = {
        'replay': {
            'initial_player': 'B',
            'require_go_game': True,
        },
        'logging': {
            'level': 'INFO',
            'file': None,
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration.

        Args:
            config_file: Path to a JSON config file, or None for defaults
        """
        self.config_file = config_file
        self.config: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load configuration from file, falling back to defaults."""
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        if not self.config_file or not os.path.exists(self.config_file):
            return
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Error loading config %s: %s", self.config_file, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("Ignoring config %s: top level is not an object", self.config_file)
            return
        self._merge(loaded)

    def save(self) -> None:
        """Save configuration to file."""
        if not self.config_file:
            raise ValueError("No config file to save to")
        with open(self.config_file, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=2)

    def _merge(self, loaded: Dict[str, Any]) -> None:
        """Overlay loaded values on the defaults."""
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(self.config.get(section), dict):
                self.config[section].update(values)
            else:
                self.config[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value.

        Args:
            section: Configuration section
            key: Configuration key
            default: Default value if not found

        Returns:
            Configuration value
        """
        if section in self.config and key in self.config[section]:
            return self.config[section][key]
        return default

    def set(self, section: str, key: str, value: Any) -> None:
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def get_initial_player(self) -> Color:
        """Color to move before any move or PL property has been replayed."""
        return Color.from_flag(self.get('replay', 'initial_player', 'B'))

    def requires_go_game(self) -> bool:
        return bool(self.get('replay', 'require_go_game', True))

    def get_log_level(self) -> str:
        return str(self.get('logging', 'level', 'INFO')).upper()

    def get_log_file(self) -> Optional[str]:
        return self.get('logging', 'file')
