"""
Target language registry.

Maps language names and aliases to ``TargetLanguage`` profiles and creates
configured compilers for them.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .core.compiler import SchemaCompiler
from .core.config import CompilerConfig, load_config
from .core.target import TargetLanguage


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class TargetRegistry:
    """Registry for managing available target languages."""

    def __init__(self):
        """Initialize empty registry."""
        self._languages: Dict[str, TargetLanguage] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: TargetLanguage,
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a target language profile.

        Args:
            language: Language profile
            aliases: Alternative names, added to the profile's own aliases
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If the profile is invalid or an alias conflicts
        """
        if not isinstance(language, TargetLanguage):
            raise RegistryError("Language must be a TargetLanguage profile")

        language_key = language.name.lower()

        # Already registered, skip silently
        if language_key in self._languages and not replace:
            return

        self._languages[language_key] = language

        for alias in list(language.aliases) + list(aliases or []):
            alias_key = alias.lower()

            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._languages:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != language_key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = language_key

    def unregister(self, language: str):
        """Unregister a language and its aliases."""
        language_key = language.lower()
        self._languages.pop(language_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def get_language(self, language: str) -> TargetLanguage:
        """
        Get the profile for a language.

        Args:
            language: Language name or alias

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()

        if language_key in self._languages:
            return self._languages[language_key]

        if language_key in self._aliases:
            return self._languages[self._aliases[language_key]]

        available = self.list_languages()
        raise RegistryError(
            f"No target registered for language: {language}. "
            f"Available: {', '.join(available)}"
        )

    def create_compiler(
        self,
        language: str,
        config: Optional[Union[CompilerConfig, Dict[str, Any], str, Path]] = None,
    ) -> SchemaCompiler:
        """
        Create a compiler for a language.

        Args:
            language: Language name or alias
            config: Configuration as CompilerConfig, override dict, or file path

        Raises:
            RegistryError: If the language is unknown or the config type invalid
        """
        target = self.get_language(language)

        if isinstance(config, CompilerConfig):
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(target.name, config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(target.name, custom_config=config)
        elif config is None:
            final_config = load_config(target.name)
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return SchemaCompiler(final_config, target)

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._languages.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        language_key = language.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == language_key)

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is registered."""
        language_key = language.lower()
        return language_key in self._languages or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Raises:
            RegistryError: If language not found
        """
        target = self.get_language(language)
        return {
            "name": target.name,
            "file_extension": target.file_extension,
            "module_separator": target.module_separator,
            "aliases": self.get_aliases_for_language(target.name),
        }


# Global registry instance - created once
_global_registry: Optional[TargetRegistry] = None


def get_registry() -> TargetRegistry:
    """Get the global target registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = TargetRegistry()
        _auto_register_languages()
    return _global_registry


def _auto_register_languages():
    """Register the bundled language profiles."""
    from .languages.python import PYTHON_TARGET
    from .languages.php import PHP_TARGET

    _global_registry.register(PYTHON_TARGET)
    _global_registry.register(PHP_TARGET)


# Public API functions using the global registry


def get_compiler(
    language: str,
    config: Optional[Union[CompilerConfig, Dict[str, Any], str, Path]] = None,
) -> SchemaCompiler:
    """Get a configured compiler from the global registry."""
    return get_registry().create_compiler(language, config)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)
