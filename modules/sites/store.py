"""Tool settings: where nginx keeps its site files."""

import os
import logging

import yaml

from config import CONFIG_PATH, DEFAULT_SETTINGS, DEFAULT_NGINX_PATH, DEFAULT_VHOSTS
from utils.error_handler import ConfigIOError, ConfigWriteError

logger = logging.getLogger("ngx.config")


class Configuration:
    """Fully populated settings; file keys are camelCase."""

    def __init__(self, nginx_path, sites_available, sites_enabled, default_vhosts):
        self.nginx_path = nginx_path
        self.sites_available = sites_available
        self.sites_enabled = sites_enabled
        self.default_vhosts = default_vhosts

    @classmethod
    def from_dict(cls, data):
        """Build from parsed settings, filling every empty field."""
        nginx_path = data.get("nginxPath") or DEFAULT_NGINX_PATH
        return cls(
            nginx_path=nginx_path,
            sites_available=data.get("sitesAvailable") or f"{nginx_path}/sites-available",
            sites_enabled=data.get("sitesEnabled") or f"{nginx_path}/sites-enabled",
            default_vhosts=data.get("defaultVhosts") or DEFAULT_VHOSTS,
        )

    def to_dict(self):
        return {
            "nginxPath": self.nginx_path,
            "sitesAvailable": self.sites_available,
            "sitesEnabled": self.sites_enabled,
            "defaultVhosts": self.default_vhosts,
        }


class ConfigStore:
    """Loads and saves the YAML settings file."""

    def __init__(self, path=None):
        self.path = path or CONFIG_PATH

    def _write_default(self):
        try:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump(DEFAULT_SETTINGS, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigWriteError(f"Cannot write default config: {self.path}", details=str(e)) from e
        logger.info("wrote default config to %s", self.path)

    def load(self) -> Configuration:
        """
        Read the settings file, creating it with defaults if absent.

        Raises:
            ConfigWriteError: The default file could not be written
            ConfigIOError: The file exists but cannot be read or parsed
        """
        if not os.path.exists(self.path):
            self._write_default()

        try:
            with open(self.path, "r") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigIOError(f"Error reading config file: {self.path}", details=str(e)) from e
        except yaml.YAMLError as e:
            raise ConfigIOError(f"Error parsing config file: {self.path}", details=str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigIOError(
                f"Error parsing config file: {self.path}",
                details="expected a mapping of settings",
            )

        return Configuration.from_dict(data)

    def read_raw(self) -> str:
        """Current settings text, for editing."""
        try:
            with open(self.path, "r") as f:
                return f.read()
        except OSError as e:
            raise ConfigIOError(f"Error reading config file: {self.path}", details=str(e)) from e

    def save(self, raw: str) -> None:
        """Write raw settings text verbatim. The caller checks it with load()."""
        try:
            with open(self.path, "w") as f:
                f.write(raw)
        except OSError as e:
            raise ConfigWriteError(f"Error writing config file: {self.path}", details=str(e)) from e
