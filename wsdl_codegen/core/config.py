"""
Configuration management for class model compilation.

Handles loading and merging configuration from JSON files,
providing per-language defaults and validation for compiler settings.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .namespaces import NamespaceConfig


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class CompilerConfig:
    """Settings for one compilation run."""

    target_language: str = "python"

    # Namespace settings
    base_namespace: str = ""
    axis_namespaces: bool = False
    structured_namespaces: bool = False

    # Class model settings
    null_constructor_arguments: bool = False
    enum_base_type: Optional[str] = None
    service_base_type: Optional[str] = None
    accessors: bool = False
    strict_identifiers: bool = False

    # Classmap settings
    wsdl_document_path: str = ""
    classmap_name: str = "classmap.ini"

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    def namespace_config(self, separator: str = ".") -> NamespaceConfig:
        """Build the namespace inflection settings for a module separator."""
        return NamespaceConfig(
            base_namespace=self.base_namespace,
            axis_style=self.axis_namespaces,
            structured=self.structured_namespaces,
            separator=separator,
        )


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["python"] = {
            "enum_base_type": "enum.Enum",
            "service_base_type": None,
            "accessors": False,
            "custom": {
                "module_layout": "package",
            },
        }

        self._configs["php"] = {
            "enum_base_type": "\\SplEnum",
            "service_base_type": "\\SoapClient",
            "accessors": True,
            "custom": {
                "file_per_class": True,
            },
        }

    def get_config(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> CompilerConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        language_key = language.lower()

        # Start with defaults
        base_config = dict(self._configs.get(language_key, {}))
        base_config["custom"] = dict(base_config.get("custom", {}))
        base_config["target_language"] = language_key

        if config_file:
            self._merge(base_config, self._load_config_file(config_file))

        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    def _merge(self, base: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        for key, value in overrides.items():
            if key == "custom" and isinstance(value, dict):
                base["custom"].update(value)
            else:
                base[key] = value

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> CompilerConfig:
        """Convert dictionary to CompilerConfig instance."""
        known_fields = {f.name for f in fields(CompilerConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return CompilerConfig(**config_args)

    def save_config(self, config: CompilerConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}") from e

    def list_languages(self) -> list[str]:
        """Get list of languages with default settings."""
        return list(self._configs.keys())

    def validate_config(self, config: CompilerConfig, language: Optional[str] = None) -> list[str]:
        """
        Validate configuration for a language.

        Returns:
            List of validation warnings
        """
        warnings = []
        language = (language or config.target_language).lower()

        if not config.classmap_name:
            warnings.append("Empty classmap_name")

        if "\n" in config.wsdl_document_path:
            warnings.append("wsdl_document_path must be a single line")

        if config.axis_namespaces and config.structured_namespaces and not config.base_namespace:
            warnings.append("Structured axis namespaces without a base_namespace")

        # Language-specific validations
        if language == "python":
            segments = [s for s in config.base_namespace.split(".") if s]
            for segment in segments:
                if not segment.isidentifier():
                    warnings.append(f"Invalid Python package name: {segment}")

        elif language == "php":
            if "." in config.base_namespace:
                warnings.append(f"PHP namespaces are separated by '\\': {config.base_namespace}")
            for option in ("enum_base_type", "service_base_type"):
                value = getattr(config, option)
                if value and not value.startswith("\\"):
                    warnings.append(f"{option} should be fully qualified: {value}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "python",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> CompilerConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


def save_config(config: CompilerConfig, output_path: Union[str, Path]):
    get_config_manager().save_config(config, output_path)


def validate_config(config: CompilerConfig, language: Optional[str] = None) -> list[str]:
    return get_config_manager().validate_config(config, language)


# Example configuration files for reference
EXAMPLE_PYTHON_CONFIG = {
    "base_namespace": "shop.generated",
    "axis_namespaces": True,
    "structured_namespaces": True,
    "null_constructor_arguments": False,
}

EXAMPLE_PHP_CONFIG = {
    "base_namespace": "Shop",
    "structured_namespaces": True,
    "accessors": True,
    "service_base_type": "\\BeSimple\\SoapClient\\SoapClient",
    "wsdl_document_path": "resources/shop.wsdl",
}
