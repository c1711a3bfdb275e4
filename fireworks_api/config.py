import logging
import os
from typing import Any, Dict, Optional

import yaml

from grass_fireworks.core import BASE, GlobalCfg, load_config

logger = logging.getLogger(__name__)

DEFAULT_SERVER_CONFIG = os.path.join(BASE, "conf", "server.yaml")


class ServerConfig:
    """Configuration for the HTTP server (conf/server.yaml)"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or DEFAULT_SERVER_CONFIG
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from server.yaml, falling back to defaults"""
        try:
            if os.path.exists(self.config_path):
                with open(self.config_path, "r", encoding="utf-8") as f:
                    config = yaml.safe_load(f)
                if not isinstance(config, dict):
                    logger.warning(
                        f"[config] Server config at {self.config_path} is empty or not a mapping, using defaults"
                    )
                    return self._get_default_config()
                logger.info(f"[config] Loaded server config from {self.config_path}")
                return config
            else:
                logger.warning(
                    f"[config] Server config not found at {self.config_path}, using defaults"
                )
                return self._get_default_config()
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"[config] Failed to load server config: {e}, using defaults")
            return self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Return default configuration"""
        return {
            "server": {
                "host": "127.0.0.1",
                "port": 8787,
                "log_level": "info",
                "reload": False,
            },
            "cache": {
                "enabled": True,
                "ttl_fireworks": 3600,
                "ttl_demo": 31536000,
                "max_entries": 1024,
            },
            "security": {
                "cors": {
                    "enabled": False,
                    "allow_origins": [],
                    "allow_methods": ["GET"],
                    "max_age": 86400,
                },
                "security_headers": {
                    "enabled": True,
                    "x_content_type_options": "nosniff",
                    "content_security_policy": "default-src 'none'; style-src 'unsafe-inline'",
                    "referrer_policy": "no-referrer",
                },
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key path (e.g., 'server.port')"""
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def reload(self):
        """Reload configuration from file"""
        self.config = self._load_config()
        logger.info("[config] Server config reloaded")


# Global config instances
server_config = ServerConfig()
global_config: GlobalCfg = load_config()
