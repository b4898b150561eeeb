"""
Configuration for the group manager code generator.

Holds the generator options and the resolution policy for the single
``SRC_DIR`` setting that decides between file and console output.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

SRC_DIR_KEY = "SRC_DIR"


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigOrigin(str, Enum):
    """Where the source directory setting came from."""

    ENVIRONMENT = "env"
    PROPERTY = "property"
    UNSET = "unset"


@dataclass(frozen=True)
class SourceDirSetting:
    """Resolved ``SRC_DIR`` value together with its origin."""

    value: str | None = None
    origin: ConfigOrigin = ConfigOrigin.UNSET

    @property
    def is_set(self) -> bool:
        return self.value is not None


def resolve_source_dir(
    environ: Mapping[str, str] | None = None,
    properties: Mapping[str, str | None] | None = None,
) -> SourceDirSetting:
    """
    Resolve the source directory root.

    Precedence is environment variable, then process property (an explicit
    value supplied by the caller), then unset. Empty strings count as unset.

    Args:
        environ: Environment mapping (usually ``os.environ``)
        properties: Explicit properties (CLI option, config file value)

    Returns:
        SourceDirSetting describing the winning value
    """
    value = (environ or {}).get(SRC_DIR_KEY)
    if value:
        return SourceDirSetting(value, ConfigOrigin.ENVIRONMENT)

    value = (properties or {}).get(SRC_DIR_KEY)
    if value:
        return SourceDirSetting(value, ConfigOrigin.PROPERTY)

    return SourceDirSetting()


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Resolved output root; unset means console output
    source_dir: SourceDirSetting = field(default_factory=SourceDirSetting)

    # Java package prefix for the generated namespace
    package_root: str = "com.globalforge.infix.qfix"

    # Runtime base types the generated code extends
    group_manager_base: str = "FixGroupMgr"
    repeating_group_base: str = "FixRepeatingGroup"

    # Output file settings
    file_extension: str = "java"
    encoding: str = "UTF-8"

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary.

        A plain ``source_dir`` string is treated as a process property.
        """
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "source_dir":
                config.source_dir = resolve_source_dir(properties={SRC_DIR_KEY: v})
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "source_dir": self.source_dir.value,
            "package_root": self.package_root,
            "group_manager_base": self.group_manager_base,
            "repeating_group_base": self.repeating_group_base,
            "file_extension": self.file_extension,
            "encoding": self.encoding,
        }


def load_config(path: str | Path) -> CodeGeneratorConfig:
    """Load a JSON configuration file.

    Raises:
        ConfigError: If the file is missing or is not a JSON object
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file must contain a JSON object: {path}")

    return CodeGeneratorConfig.from_dict(data)
