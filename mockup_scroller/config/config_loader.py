"""
Configuration loader for mockup-scroller

Handles loading and merging of YAML configuration files with environment variable overrides.
"""

import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, List, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = 'MOCKUP_SCROLLER_'


class ConfigLoader:
    """
    Loads configuration from YAML files with cascading priority:
    1. Default configuration (mockup_scroller/config/default.yaml)
    2. User configuration (config/config.yaml at project root, or an explicit path)
    3. Environment variable overrides (MOCKUP_SCROLLER_SECTION_KEY format)
    """

    def __init__(self, user_config_path: Optional[str] = None):
        """
        Initialize configuration loader

        Args:
            user_config_path: Path to user config file (default: config/config.yaml at project root)
        """
        self.package_dir = Path(__file__).parent
        self.default_config_path = self.package_dir / "default.yaml"

        if user_config_path:
            self.user_config_path = Path(user_config_path).expanduser()
        else:
            project_root = self.package_dir.parent.parent
            self.user_config_path = project_root / "config" / "config.yaml"

        self.config = self._load_config()

    def _load_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML file and return as dictionary"""
        if not file_path.exists():
            logger.debug(f"Config file not found: {file_path}")
            return {}

        with open(file_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f"Config file must contain a mapping at top level: {file_path}")
        return config

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge ``override`` on top of ``base``"""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    @staticmethod
    def _parse_env_value(raw: str) -> Any:
        try:
            if '.' in raw:
                return float(raw)
            return int(raw)
        except ValueError:
            pass
        lowered = raw.lower()
        if lowered in ('true', 'yes'):
            return True
        if lowered in ('false', 'no'):
            return False
        if lowered in ('null', 'none'):
            return None
        return raw

    @staticmethod
    def _match_key(section: Dict[str, Any], parts: List[str]) -> Optional[int]:
        """
        Number of leading ``parts`` that join (with underscores) into an existing key.

        Longest match wins so ``gif_width`` is found before ``gif``.
        """
        for count in range(len(parts), 0, -1):
            if '_'.join(parts[:count]) in section:
                return count
        return None

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration

        Format: MOCKUP_SCROLLER_SECTION_KEY, e.g. MOCKUP_SCROLLER_ENCODER_GIF_WIDTH=640.
        Only keys that already exist in the configuration can be overridden,
        which lets key names contain underscores.
        """
        result = self._merge_configs({}, config)

        for env_key, env_value in os.environ.items():
            if not env_key.startswith(ENV_PREFIX):
                continue

            parts = env_key[len(ENV_PREFIX):].lower().split('_')
            current = result
            while parts:
                if not isinstance(current, dict):
                    break
                matched = self._match_key(current, parts)
                if matched is None:
                    logger.debug(f"Ignoring unknown config override: {env_key}")
                    break
                key = '_'.join(parts[:matched])
                parts = parts[matched:]
                if not parts:
                    current[key] = self._parse_env_value(env_value)
                    logger.debug(f"Applied env override: {env_key} = {env_value}")
                    break
                current = current[key]

        return result

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration with cascading priority"""
        logger.debug(f"Loading default config from: {self.default_config_path}")
        config = self._load_yaml(self.default_config_path)

        if self.user_config_path.exists():
            logger.info(f"Loading user config from: {self.user_config_path}")
            config = self._merge_configs(config, self._load_yaml(self.user_config_path))
        else:
            logger.debug(f"No user config found at: {self.user_config_path}")

        return self._apply_env_overrides(config)

    def get(self, *keys, default: Any = None) -> Any:
        """
        Get configuration value using dot notation or multiple keys

        Examples:
            config.get('encoder', 'gif_width')
            config.get('encoder.gif_width')
            config.get('png', 'compress_level', default=6)
        """
        if len(keys) == 1 and isinstance(keys[0], str) and '.' in keys[0]:
            keys = keys[0].split('.')

        current = self.config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get an entire configuration section, or an empty dict"""
        return self.get(section, default={})

    def __repr__(self) -> str:
        return f"ConfigLoader(default={self.default_config_path}, user={self.user_config_path})"
