"""
Configuration management for code generation.

Every language exposes its options as a dataclass derived from
:class:`GeneratorOptions`. Options can be built from plain dictionaries
(snake_case or camelCase keys), JSON configuration files and
``key=value`` command line overrides.
"""

import json
import re
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Dict, Any, Optional, Union, List, Type, TypeVar

from ...logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound="GeneratorOptions")

_CAMEL_HUMP = re.compile(r"(?<=[a-z0-9])([A-Z])")


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


def camel_to_snake_key(key: str) -> str:
    """Map an option key such as ``useArrayOfPointers`` to ``use_array_of_pointers``."""
    return _CAMEL_HUMP.sub(r"_\1", key).lower()


@dataclass
class GeneratorOptions:
    """Base class for per-language generator options."""

    # Option keys whose camelCase spelling does not map mechanically
    aliases = {}

    # Nesting guard for shape discovery; None means unbounded
    max_depth: Optional[int] = None

    @classmethod
    def option_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Dict[str, Any]] = None) -> T:
        """
        Build options from a dictionary, keeping defaults for missing keys.

        Args:
            data: Option values keyed by snake_case or camelCase name

        Returns:
            Options instance

        Raises:
            ConfigError: If a key is not an option of this language
        """
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            raise ConfigError(
                f"Options must be a mapping, got {type(data).__name__}"
            )

        known = set(cls.option_names())
        values = {}
        for key, value in data.items():
            name = cls.aliases.get(key, camel_to_snake_key(key))
            if name not in known:
                raise ConfigError(
                    f"Unknown option '{key}' for {cls.__name__}. "
                    f"Valid options: {', '.join(sorted(known))}"
                )
            values[name] = value

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ConfigManager:
    """Loads generator options from files and command line overrides."""

    def load(
        self,
        language: str,
        options_class: Type[T],
        config_file: Optional[Union[str, Path]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> T:
        """
        Get complete options for a language.

        A configuration file may either hold the options directly or be
        keyed by language name, e.g. ``{"go": {"package_name": "models"}}``.

        Args:
            language: Canonical language name
            options_class: Options dataclass of the target generator
            config_file: Path to JSON configuration file
            overrides: Values that take precedence over the file

        Returns:
            Merged options for the language
        """
        merged: Dict[str, Any] = {}

        if config_file:
            file_config = self._load_config_file(config_file)
            if isinstance(file_config.get(language), dict):
                file_config = file_config[language]
            merged.update(file_config)

        if overrides:
            merged.update(overrides)

        logger.debug(f"Options for {language}: {merged}")
        return options_class.from_dict(merged)

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
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config


def parse_option_overrides(pairs: Optional[List[str]]) -> Dict[str, Any]:
    """
    Parse ``key=value`` strings from the command line.

    Values are read as JSON literals (``true``, ``17``, ``"x"``) and fall
    back to the raw string, so ``package_name=models`` works unquoted.
    """
    overrides: Dict[str, Any] = {}
    for pair in pairs or []:
        key, sep, raw = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigError(f"Invalid option '{pair}', expected key=value")
        try:
            overrides[key] = json.loads(raw)
        except json.JSONDecodeError:
            overrides[key] = raw
    return overrides


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_options(
    language: str,
    options_class: Type[T],
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> T:
    """Convenience wrapper around :meth:`ConfigManager.load`."""
    return get_config_manager().load(language, options_class, config_file, overrides)
