import logging
import os
from typing import Any, Dict, Optional

import yaml

from ..utils.env import env_bool, parse_bool, project_root

logger = logging.getLogger("frontline.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    "app_name": "frontline",
    "debug": False,
    "base_dir": None,
    "default_controller": "Home",
    "default_action": "index",
}


class ConfigManager:
    """
    Application settings: optional config/app.yaml, overridden by environment.

    Environment:
        APP_DEBUG             debug sink and DEBUG-level emission
        APP_BASE_DIR          project root that holds storage/logs
        LOG_LEVEL             diagnostic console level
        FRONTLINE_CONFIG_DIR  directory holding app.yaml
    """

    def __init__(self, config_dir: Optional[str] = None):
        self.config_dir = config_dir or os.getenv("FRONTLINE_CONFIG_DIR", "config")
        self.app_config_path = os.path.join(self.config_dir, "app.yaml")
        self.config = self._load_config()

        # Переменные окружения имеют приоритет над YAML
        self.debug = env_bool("APP_DEBUG", self._yaml_bool(self.config.get("debug")))
        self.base_dir = os.path.abspath(
            os.getenv("APP_BASE_DIR") or self.config.get("base_dir") or project_root()
        )
        self.log_level = os.getenv("LOG_LEVEL", "WARNING")
        self.app_name = str(self.config.get("app_name") or DEFAULT_CONFIG["app_name"])
        self.default_controller = str(self.config.get("default_controller") or DEFAULT_CONFIG["default_controller"])
        self.default_action = str(self.config.get("default_action") or DEFAULT_CONFIG["default_action"])

        logger.info(
            "Configuration manager initialized: config_dir=%s debug_enabled=%s base_dir=%s app_config_exists=%s",
            self.config_dir, self.debug, self.base_dir, os.path.exists(self.app_config_path),
        )

    def _load_config(self) -> Dict[str, Any]:
        config = dict(DEFAULT_CONFIG)
        try:
            with open(self.app_config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.debug("Configuration file not found: %s; using defaults", self.app_config_path)
            return config
        except yaml.YAMLError as e:
            logger.error("Error parsing YAML file %s: %s", self.app_config_path, e)
            return config

        if isinstance(data, dict):
            config.update({k: v for k, v in data.items() if v is not None})
        else:
            logger.warning("Ignoring %s: top level is not a mapping", self.app_config_path)
        return config

    @staticmethod
    def _yaml_bool(value: Any) -> bool:
        # debug: "false" is a string in YAML, not a bool
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return parse_bool(str(value))

    def get_config(self) -> Dict[str, Any]:
        return self.config

    @property
    def is_debug_enabled(self) -> bool:
        """Возвращает True если включен режим отладки"""
        return self.debug
