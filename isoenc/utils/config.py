"""
isoenc Configuration Management

Loads and validates configuration settings from YAML files, with
environment variable overrides.
"""

import codecs
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.encoder import FallbackAction, check_replacement


class EncodingConfig(BaseModel):
    """Encoder settings."""
    action: FallbackAction = FallbackAction.DEFAULT
    replacement: Optional[str] = None
    source_encoding: str = Field(default="utf-8")

    @field_validator('replacement')
    @classmethod
    def validate_replacement(cls, v):
        if v is None:
            return v
        check_replacement(v)
        return v

    @field_validator('source_encoding')
    @classmethod
    def validate_source_encoding(cls, v):
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown source encoding: {v}")
        return v

    @model_validator(mode="after")
    def validate_replace_has_replacement(self):
        if self.action is FallbackAction.REPLACE and self.replacement is None:
            raise ValueError("action 'replace' requires a replacement character")
        return self


class OutputConfig(BaseModel):
    """File output settings."""
    newline: str = Field(default="keep")
    overwrite: bool = False

    @field_validator('newline')
    @classmethod
    def validate_newline(cls, v):
        valid_modes = ["keep", "lf", "crlf"]
        if v not in valid_modes:
            raise ValueError(f"Invalid newline mode. Must be one of: {valid_modes}")
        return v


class LoggingConfig(BaseModel):
    """Logging system configuration."""
    level: str = Field(default="WARNING")
    console_format: str = Field(default="rich")
    log_file: Optional[str] = None

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v.upper()

    @field_validator('console_format')
    @classmethod
    def validate_console_format(cls, v):
        valid_formats = ["rich", "simple", "json"]
        if v not in valid_formats:
            raise ValueError(f"Invalid console format. Must be one of: {valid_formats}")
        return v


class IsoEncConfig(BaseModel):
    """Main isoenc configuration model."""
    encoding: EncodingConfig = EncodingConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()


class ConfigManager:
    """
    Configuration manager for isoenc.

    Handles loading configuration from YAML files, environment variables,
    and provides validation and access to configuration settings.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory containing configuration files
        """
        self.config_dir = Path(config_dir) if config_dir else Path(__file__).parent.parent / "config"
        self._config: Optional[IsoEncConfig] = None

    def load_config(self,
                    config_name: str = "default",
                    overrides: Optional[Dict[str, Any]] = None) -> IsoEncConfig:
        """
        Load configuration from YAML file with optional overrides.

        Args:
            config_name: Name of config file (without .yaml extension)
            overrides: Dictionary of configuration overrides

        Returns:
            Validated isoenc configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If configuration is invalid
        """
        return self.load_config_file(self.config_dir / f"{config_name}.yaml", overrides)

    def load_config_file(self,
                         config_file: Path,
                         overrides: Optional[Dict[str, Any]] = None) -> IsoEncConfig:
        """
        Load configuration from a YAML file at an explicit path.

        Args:
            config_file: Path of the file, any name or extension
            overrides: Dictionary of configuration overrides

        Returns:
            Validated isoenc configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If configuration is invalid
        """
        config_file = Path(config_file)

        if not config_file.is_file():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        config_data = self._apply_env_overrides(config_data)

        if overrides:
            config_data = self._merge_config(config_data, overrides)

        try:
            self._config = IsoEncConfig(**config_data)
            return self._config
        except Exception as e:
            raise ValueError(f"Invalid configuration: {e}")

    def get_config(self) -> IsoEncConfig:
        """
        Get current configuration.

        Raises:
            RuntimeError: If no configuration is loaded
        """
        if self._config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self._config

    def save_config(self, config: IsoEncConfig, filename: str):
        """
        Save configuration to YAML file.

        Args:
            config: Configuration to save
            filename: Output filename (without .yaml extension)
        """
        output_file = self.config_dir / f"{filename}.yaml"
        config_dict = config.model_dump(mode="json")

        with open(output_file, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2)

    def validate_config(self, config_data: Dict[str, Any]) -> bool:
        """Return True if ``config_data`` is a valid configuration."""
        try:
            IsoEncConfig(**config_data)
            return True
        except Exception:
            return False

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'ISOENC_ACTION': ('encoding', 'action'),
            'ISOENC_REPLACEMENT': ('encoding', 'replacement'),
            'ISOENC_SOURCE_ENCODING': ('encoding', 'source_encoding'),
            'ISOENC_NEWLINE': ('output', 'newline'),
            'ISOENC_OVERWRITE': ('output', 'overwrite'),
            'ISOENC_LOG_LEVEL': ('logging', 'level'),
        }

        for env_var, (section, key) in env_mappings.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if key == 'overwrite':
                    value = value.lower() in ('true', '1', 'yes', 'on')
                elif key == 'action':
                    value = value.lower()

                if section not in config_data or config_data[section] is None:
                    config_data[section] = {}
                config_data[section][key] = value

        return config_data

    def _merge_config(self, base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries."""
        result = base.copy()

        for key, value in overrides.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value

        return result


# Global configuration manager instance
config_manager = ConfigManager()


def get_config() -> IsoEncConfig:
    """Get the global configuration instance."""
    return config_manager.get_config()


def load_config(config_name: str = "default", **overrides) -> IsoEncConfig:
    """Load configuration with the global manager."""
    return config_manager.load_config(config_name, overrides)
