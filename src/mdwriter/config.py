"""Writer configuration schema and loading."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from mdwriter.exceptions import ConfigurationError
from mdwriter.linefeed import LineSeparator

DEFAULT_CONFIG_FILE = ".mdwriter.yaml"

_SEPARATORS = {
    "lf": LineSeparator.LF,
    "crlf": LineSeparator.CRLF,
}


class WriterConfig(BaseModel):
    """Document writer configuration.

    Loaded from the ``markdown:`` section of a YAML file.
    """

    line_separator: Literal["auto", "lf", "crlf"] = Field(
        default="auto", description="Separator policy; auto follows the host platform"
    )
    encoding: str = Field(default="utf-8", description="Encoding used by file sinks")

    def resolve_line_separator(self, platform: str | None = None) -> LineSeparator:
        """Turn the configured policy into a concrete separator."""
        if self.line_separator == "auto":
            return LineSeparator.for_platform(platform)
        return _SEPARATORS[self.line_separator]


def load_writer_config(path: Path | str | None = None) -> WriterConfig:
    """Load writer configuration from a YAML file.

    Args:
        path: Config file path. Defaults to .mdwriter.yaml in the cwd.

    Returns:
        WriterConfig with values from file or defaults

    Raises:
        ConfigurationError: If the file is not valid YAML or fails validation

    Example:
        config = load_writer_config()
        doc = Markdown.from_config(config, sys.stdout)
    """
    config_path = Path(path) if path is not None else Path.cwd() / DEFAULT_CONFIG_FILE

    # Return defaults if no config file
    if not config_path.exists():
        return WriterConfig()

    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"Expected a mapping in {config_path}")

    section = raw_config.get("markdown") or {}

    try:
        return WriterConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid markdown config in {config_path}: {e}") from e
