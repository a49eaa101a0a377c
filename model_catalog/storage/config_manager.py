"""
Manages loading, validation, and migration of the INI configuration file.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from model_catalog.exceptions import ConfigurationError
from model_catalog.models.config import CatalogConfig

log = logging.getLogger(__name__)


class ConfigManager:
    """Handles all operations related to the application's INI config file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_config(self, cli_options: dict[str, Any] | None = None) -> CatalogConfig:
        """
        Loads configuration from the INI file, applies CLI overrides, and validates it.

        A missing file is not an error: the defaults are used instead.

        Args:
            cli_options: A dictionary of options provided via the command line.

        Returns:
            A validated CatalogConfig object.

        Raises:
            ConfigurationError: If the config file is unreadable or validation
            fails.
        """
        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    f"Error parsing configuration file: {e}"
                ) from e

            if self._migrate_if_needed():
                log.info(
                    "[yellow]Configuration file was updated with new default values."
                    "[/yellow]"
                )
        else:
            log.debug(
                f"No configuration file at '{self.config_file_path}', using defaults."
            )

        try:
            config_from_file = self._get_config_as_dict()
        except ValueError as e:
            raise ConfigurationError(f"Invalid value in configuration file: {e}") from e

        # Override with CLI options
        if cli_options:
            config_from_file.update(cli_options)

        try:
            config_dir = self.config_file_path.parent
            return CatalogConfig(**config_from_file, config_path=str(config_dir))
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def save_new_config(self, settings: dict[str, Any] | None = None) -> None:
        """
        Creates and saves a new configuration file.

        Args:
            settings: A dictionary of settings to save. Missing keys take the
            model defaults.
        """
        settings = settings or {}
        config = configparser.ConfigParser(interpolation=None)
        config["DEFAULT"] = {}

        defaults = CatalogConfig.model_construct()
        for key in sorted(CatalogConfig.get_ini_keys()):
            value = settings.get(key, getattr(defaults, key, None))
            if isinstance(value, bool):
                config["DEFAULT"][key] = "true" if value else "false"
            elif value is not None:
                config["DEFAULT"][key] = str(value)

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                config.write(configfile)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration file: {e}") from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Reads the 'DEFAULT' section of the INI file into a dictionary."""
        section = self._parser["DEFAULT"]
        return {
            "catalog_file": section.get("catalog_file", ""),
            "assets_dir": section.get("assets_dir", "."),
            "output_format": section.get("output_format", "table"),
            "json_logs": section.getboolean("json_logs", False),
        }

    def _migrate_if_needed(self) -> bool:
        """Adds missing default values to an existing config file."""
        defaults = CatalogConfig.model_construct()
        needs_saving = False

        config_section = self._parser["DEFAULT"]

        for key in sorted(CatalogConfig.get_ini_keys()):
            if key not in config_section:
                default_value = getattr(defaults, key)
                if isinstance(default_value, bool):
                    config_section[key] = "true" if default_value else "false"
                else:
                    config_section[key] = str(default_value)

                needs_saving = True
                log.debug(
                    f"Migrating config: added missing key '{key}' with "
                    f"value '{config_section[key]}'."
                )

        if needs_saving:
            try:
                with open(self.config_file_path, "w", encoding="utf-8") as f:
                    self._parser.write(f)
            except OSError as e:
                log.error(f"Could not save migrated configuration file: {e}")
                return False

        return needs_saving

    def get_config_as_dict(self) -> dict[str, Any]:
        """Returns the raw settings as read from the file, for display."""
        if self.config_file_path.is_file():
            self._parser.read(self.config_file_path, encoding="utf-8")
        return self._get_config_as_dict()
