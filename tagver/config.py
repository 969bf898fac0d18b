"""Configuration file loader for tagver.

Handles discovery, loading, parsing, and validation of configuration files
for the describe tool. Supports two formats:

- ``tagver.toml``: settings under ``[tagver]`` table
- ``pyproject.toml``: settings under ``[tool.tagver]`` table

Discovery order:

1. Explicit path from ``--config`` or ``TAGVER_CONFIG``
2. ``tagver.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.tagver]`` section

Configuration precedence: defaults < config file < environment < CLI args.

Example (``pyproject.toml``)::

    [tool.tagver]
    strategy = "abbrev"
    release = true
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from tagver.exceptions import ConfigError
from tagver.utils.logger import get_logger
from tagver.constants import DEFAULT_RELEASE_TRACKING, VERSION_STRATEGIES

logger = get_logger("config")

_KNOWN_KEYS = frozenset({"strategy", "release"})


@dataclass
class TagVerConfig:
    """Parsed and validated tagver configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        strategy: Versioning strategy name, or ``None`` to use the built-in
            default.
        release: Use the commit distance as release number.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    strategy: Optional[str] = None
    release: bool = DEFAULT_RELEASE_TRACKING

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "strategy": self.strategy,
            "release": self.release,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    tagver_toml = cwd / "tagver.toml"
    if tagver_toml.is_file():
        logger.debug("Found tagver.toml: %s", tagver_toml)
        return tagver_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_tagver_section(pyproject_toml):
        logger.debug("Found [tool.tagver] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_tagver_section(path: Path) -> bool:
    """Check if pyproject.toml contains a [tool.tagver] section.

    A broken pyproject.toml belongs to the project, not to tagver, so
    parse errors just mean "no section".
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    return "tagver" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> TagVerConfig:
    """Load and validate tagver configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`TagVerConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        return TagVerConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("tagver", {})
    else:
        section = raw.get("tagver", {})

    if not section:
        logger.debug("Config file found but no tagver section, using defaults")
        return TagVerConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> TagVerConfig:
    """Parse and validate a ``[tagver]`` or ``[tool.tagver]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types or an unknown strategy.
    """
    config = TagVerConfig()

    unknown = set(section.keys()) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "strategy" in section:
        val = section["strategy"]
        if not isinstance(val, str):
            raise ConfigError(
                f"strategy must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="strategy",
            )
        if val not in VERSION_STRATEGIES:
            raise ConfigError(
                f"strategy must be one of {', '.join(VERSION_STRATEGIES)}, got '{val}'",
                config_path=config_path,
                option="strategy",
            )
        config.strategy = val

    if "release" in section:
        val = section["release"]
        if not isinstance(val, bool):
            raise ConfigError(
                f"release must be a boolean, got {type(val).__name__}",
                config_path=config_path,
                option="release",
            )
        config.release = val

    return config
