"""Configuration management for fskit."""
import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from fskit.config.paths import default_config_path

# fskit.platform.logging imports settings, which import this module.
logger = logging.getLogger("fskit.config")


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
    """Library configuration."""

    # Log file path (console only when unset)
    log_file: Path | None = _path_field()

    # Console log level name
    console_log_level: str = "WARNING"

    # Permission bits used by directories.create()
    directory_mode: int = 0o777

    # Indentation used when pretty printing JSON
    json_indent: int = 4

    # Suffixes appended by files.read_template() and files.read_stub()
    template_extension: str = "tpl"
    stub_extension: str = "stub"

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# fskit Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Console logging is always enabled; set this to also log to a file")
        lines.append('# Example: log_file = "/path/to/logs/fskit.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level (DEBUG, INFO, WARNING, ERROR)")
        lines.append(f"console_log_level = {self._format_toml_value(config['console_log_level'])}")
        lines.append("")

        lines.append("# Permission bits for newly created directories (decimal or 0o octal)")
        lines.append(f"directory_mode = 0o{config['directory_mode']:o}")
        lines.append("")

        lines.append("# Indentation for pretty printed JSON files")
        lines.append(f"json_indent = {self._format_toml_value(config['json_indent'])}")
        lines.append("")

        lines.append("# Suffixes appended to template and stub names")
        lines.append(
            f"template_extension = {self._format_toml_value(config['template_extension'])}"
        )
        lines.append(f"stub_extension = {self._format_toml_value(config['stub_extension'])}")
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
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults without writing anything to disk.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        if not config_file.exists():
            instance = cls()
            cls._instance = instance
            cls._loaded_from = None
            return instance

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        values = {key: value for key, value in config_dict.items() if key in known}
        if isinstance(values.get("log_file"), str) and not values["log_file"].strip():
            values["log_file"] = None

        logger.debug("Configuration loaded from %s", config_file)
        instance = cls(**values)
        cls._instance = instance
        cls._loaded_from = config_file
        return instance


# Global configuration instance
config = Config.load()
