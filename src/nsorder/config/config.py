"""Configuration management for nsorder."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from nsorder.config.file_ops import write_text_file
from nsorder.config.paths import default_config_path
from nsorder.platform.logging import logger


class ConfigError(Exception):
    """Raised when the configuration file cannot be read."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Custom directive order, e.g. "System;Microsoft;**;MyCompany"
    import_directives_custom_order: str | None = None

    # Place System/Microsoft/Windows/Xamarin roots before other roots
    place_system_directives_first: bool = True

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.import_directives_custom_order is not None and not self.import_directives_custom_order.strip():
            self.import_directives_custom_order = None

    def save(self, path: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Target file; defaults to :func:`default_config_path`.

        Returns:
            Path: File the configuration was written to.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# nsorder Configuration File")
        lines.append("")

        lines.append("# Custom import directive order (optional)")
        lines.append("# Groups separated by ';'. '*' keeps unmatched directives apart,")
        lines.append("# '**' gathers them into one group (appended last when omitted).")
        lines.append('# Example: import_directives_custom_order = "System;Microsoft;**;MyCompany"')
        if config["import_directives_custom_order"] is not None:
            lines.append(
                "import_directives_custom_order = "
                + self._format_toml_value(config["import_directives_custom_order"])
            )
        lines.append("")

        lines.append("# Sort System, Microsoft, Windows and Xamarin roots first (default true)")
        lines.append(
            "place_system_directives_first = "
            + self._format_toml_value(config["place_system_directives_first"])
        )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/nsorder.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from file, creating a default one if missing.

        Args:
            path: Explicit config file; defaults to :func:`default_config_path`.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML or holds
                values of the wrong type.
        """
        if cls._instance is not None and (path is None or path == cls._loaded_from):
            return cls._instance

        config_file = path or default_config_path()

        if not config_file.exists():
            config = cls()
            _ = config.save(config_file)
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error("Failed to load configuration: %s", e)
            raise ConfigError(f"Invalid TOML in {config_file}: {e}") from e

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
        values = {key: value for key, value in config_dict.items() if key in known}

        order = values.get("import_directives_custom_order")
        if order is not None and not isinstance(order, str):
            raise ConfigError("import_directives_custom_order must be a string")
        system_first = values.get("place_system_directives_first", True)
        if not isinstance(system_first, bool):
            raise ConfigError("place_system_directives_first must be a boolean")
        log_file = values.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ConfigError("log_file must be a string")

        logger.info("Configuration loaded from %s", config_file)
        instance = cls(**values)

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached singleton so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "ConfigError"]
