"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import AbstractSet, Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from ...logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


# camelCase option names accepted from JSON files
KEY_ALIASES = {
    "passthroughCustomScalars": "passthrough_custom_scalars",
    "customScalarsPrefix": "custom_scalars_prefix",
    "outputFile": "output_file",
    "indentSize": "indent_size",
    "useTabs": "use_tabs",
    "addComments": "add_comments",
    "generateInitializers": "generate_initializers",
    "addDeprecationAttributes": "add_deprecation_attributes",
}


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_file: Optional[str] = None
    namespace: Optional[str] = None

    # Custom scalar naming
    passthrough_custom_scalars: bool = False
    custom_scalars_prefix: str = ""

    # Code style settings
    indent_size: int = 2
    use_tabs: bool = False

    # Additional output
    add_comments: bool = True
    generate_initializers: bool = False
    add_deprecation_attributes: bool = False

    # Unrecognized options, kept for templates and callers
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager with the Realm model defaults."""
        self._defaults: Dict[str, Any] = {
            "namespace": None,
            "passthrough_custom_scalars": False,
            "custom_scalars_prefix": "",
            "indent_size": 2,
            "add_comments": True,
            "generate_initializers": False,
            "add_deprecation_attributes": False,
        }

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Merge defaults, the config file and overrides, in that order.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged generator configuration
        """
        base_config = dict(self._defaults)

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(self._normalize_keys(file_config))

        if custom_config:
            base_config.update(self._normalize_keys(custom_config))

        return self._dict_to_config(base_config)

    def _normalize_keys(self, config: Dict[str, Any]) -> Dict[str, Any]:
        return {KEY_ALIASES.get(key, key): value for key, value in config.items()}

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get('custom') or {})
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig,
                        reserved_words: Optional[AbstractSet[str]] = None) -> list[str]:
        """
        Validate configuration.

        Args:
            config: Configuration to check
            reserved_words: Keywords the namespace must avoid

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.namespace is not None:
            if not config.namespace.isidentifier():
                warnings.append(f"Invalid namespace identifier: {config.namespace!r}")
            elif reserved_words and config.namespace in reserved_words:
                warnings.append(f"Namespace {config.namespace!r} is a reserved word")

        if config.custom_scalars_prefix and not config.passthrough_custom_scalars:
            warnings.append(
                "custom_scalars_prefix has no effect unless passthrough_custom_scalars is set"
            )

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged generator configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)
