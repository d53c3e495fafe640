"""Configuration management for batchtag."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from batchtag.config.file_ops import write_text_file
from batchtag.config.paths import default_config_path
from batchtag.platform.logging import logger

DEFAULT_FORMAT_STRING = "%artist%- %title%"

DEFAULT_FORMAT_STRINGS: tuple[str, ...] = (
    "%artist%- %title%",
    "%title%- %artist%",
    "%track%- %title%",
    "%title%",
)

DEFAULT_ILLEGAL_CHARACTER_SUBSTITUTE = "_"


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

    # Log file path
    log_file: Path | None = _path_field()

    # Music folder behaviour
    include_subfolders: bool = True
    remember_last_opened_folder: bool = True
    last_opened_folder: Path | None = _path_field()

    # Music file behaviour
    preserve_modification_timestamp: bool = False

    # Filename <-> tag conversion
    filename_to_tag_format: str = DEFAULT_FORMAT_STRING
    tag_to_filename_format: str = DEFAULT_FORMAT_STRING
    format_strings: list[str] = field(default_factory=lambda: list(DEFAULT_FORMAT_STRINGS))
    illegal_character_substitute: str = DEFAULT_ILLEGAL_CHARACTER_SUBSTITUTE

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
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# batchtag Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/batchtag.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Music folder")
        lines.append("# include_subfolders: scan nested folders when opening a music folder")
        lines.append(
            f"include_subfolders = {self._format_toml_value(config['include_subfolders'])}"
        )
        lines.append(
            "remember_last_opened_folder = "
            f"{self._format_toml_value(config['remember_last_opened_folder'])}"
        )
        if config["last_opened_folder"] is not None:
            lines.append(
                f"last_opened_folder = {self._format_toml_value(config['last_opened_folder'])}"
            )
        lines.append("")

        lines.append("# Music file")
        lines.append("# Keep the original modification time when tags are written")
        lines.append(
            "preserve_modification_timestamp = "
            f"{self._format_toml_value(config['preserve_modification_timestamp'])}"
        )
        lines.append("")

        lines.append("# Format strings (placeholders: %filename% %title% %artist% %album% %year%")
        lines.append("# %track% %albumArtist% %composer% %genre% %comment%)")
        lines.append(
            f"filename_to_tag_format = {self._format_toml_value(config['filename_to_tag_format'])}"
        )
        lines.append(
            f"tag_to_filename_format = {self._format_toml_value(config['tag_to_filename_format'])}"
        )
        lines.append(f"format_strings = {self._format_toml_value(config['format_strings'])}")
        lines.append("# Replacement for characters that are illegal in filenames")
        lines.append(
            "illegal_character_substitute = "
            f"{self._format_toml_value(config['illegal_character_substitute'])}"
        )
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
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
