"""
Generator registry system for managing available code generators.

Provides registration by name and alias, and instantiation of language
generators with their options.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import ConfigError, GeneratorOptions, load_options


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Registry for managing available code generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'go', 'python')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this language
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, CodeGenerator)
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()

        if language_key in self._generators and not replace:
            return

        self._generators[language_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary language"
                    )
                if (
                    alias_key in self._aliases
                    and self._aliases[alias_key] != language_key
                ):
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = language_key

    def unregister(self, language: str):
        """Unregister a generator and its aliases."""
        language_key = language.lower()
        self._generators.pop(language_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve(self, language: str) -> str:
        """
        Resolve a name or alias to the primary language name.

        Raises:
            RegistryError: If language not found
        """
        language_key = language.lower()
        if language_key in self._generators:
            return language_key
        if language_key in self._aliases:
            return self._aliases[language_key]

        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """
        Get generator class for language.

        Args:
            language: Language name or alias

        Returns:
            Generator class

        Raises:
            RegistryError: If language not found
        """
        return self._generators[self.resolve(language)]

    def create_generator(
        self,
        language: str,
        options: Optional[Union[GeneratorOptions, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for language.

        Args:
            language: Language name or alias
            options: Options instance, dict of option values, or config file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If the language is unknown or the options are invalid
        """
        primary = self.resolve(language)
        generator_class = self._generators[primary]

        try:
            if isinstance(options, (str, Path)):
                options = load_options(
                    primary, generator_class.options_class, config_file=options
                )
            return generator_class(options)
        except ConfigError as e:
            raise RegistryError(f"Failed to create {primary} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Get list of registered primary language names."""
        return sorted(self._generators.keys())

    def get_aliases_for_language(self, language: str) -> List[str]:
        """Get all aliases for a specific primary language."""
        language_key = language.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == language_key
        )

    def list_all_names(self) -> Dict[str, List[str]]:
        """Map each primary language to all of its names, aliases included."""
        return {
            language: [language] + self.get_aliases_for_language(language)
            for language in self.list_languages()
        }

    def is_supported(self, language: str) -> bool:
        """Check if a language name or alias is registered."""
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Get information about a registered language.

        Args:
            language: Language name or alias

        Returns:
            Dict with language information

        Raises:
            RegistryError: If language not found
        """
        primary = self.resolve(language)
        generator_class = self._generators[primary]
        generator = generator_class()

        return {
            "name": generator.language_name,
            "label": generator_class.label,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(primary),
            "module": generator_class.__module__,
            "options": generator.options.to_dict(),
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """
    Register every built-in generator with its aliases.

    This is the single source of truth for generator registration.
    """
    from .languages.cpp import CppGenerator
    from .languages.csharp import CSharpGenerator
    from .languages.dart import DartGenerator
    from .languages.elixir import ElixirGenerator
    from .languages.erlang import ErlangGenerator
    from .languages.go import GoGenerator
    from .languages.java import JavaGenerator
    from .languages.javascript import JavaScriptGenerator
    from .languages.kotlin import KotlinGenerator
    from .languages.objc import ObjCGenerator
    from .languages.php import PhpGenerator
    from .languages.python import PythonGenerator
    from .languages.r import RGenerator
    from .languages.ruby import RubyGenerator
    from .languages.rust import RustGenerator
    from .languages.scala import ScalaGenerator
    from .languages.sql import SqlGenerator
    from .languages.swift import SwiftGenerator
    from .languages.typescript import TypeScriptGenerator
    from .languages.vbnet import VBNetGenerator

    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
    registry.register("python", PythonGenerator, aliases=["py"])
    registry.register("go", GoGenerator, aliases=["golang"])
    registry.register("rust", RustGenerator, aliases=["rs"])
    registry.register("swift", SwiftGenerator)
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])
    registry.register("java", JavaGenerator)
    registry.register("csharp", CSharpGenerator, aliases=["cs", "c#"])
    registry.register("cpp", CppGenerator, aliases=["c++", "cxx"])
    registry.register("php", PhpGenerator)
    registry.register("dart", DartGenerator, aliases=["flutter"])
    registry.register("ruby", RubyGenerator, aliases=["rb"])
    registry.register("r", RGenerator)
    registry.register("objc", ObjCGenerator, aliases=["objective-c", "objectivec"])
    registry.register("sql", SqlGenerator)
    registry.register("vbnet", VBNetGenerator, aliases=["vb", "vb.net"])
    registry.register("scala", ScalaGenerator)
    registry.register("erlang", ErlangGenerator, aliases=["erl"])
    registry.register("elixir", ElixirGenerator, aliases=["ex"])
    registry.register("javascript", JavaScriptGenerator, aliases=["js"])


# Public API functions using the global registry


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a generator in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(
    language: str,
    options: Optional[Union[GeneratorOptions, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """
    Get generator instance from global registry.

    Args:
        language: Language name or alias
        options: Options instance, dict, or config file path

    Returns:
        Generator instance
    """
    return get_registry().create_generator(language, options)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {
        language: get_language_info(language)
        for language in list_supported_languages()
    }
