"""Load and parse configuration."""

from __future__ import annotations

import logging
from enum import Enum
from io import BufferedReader, StringIO
from typing import Any

import yaml
from pydantic import Field

from rdtools.common.data import FrozenBaseModel

logger = logging.getLogger(__name__)


class InputEncoding(Enum):
    """How RDATA is given on the command line."""

    HEX = "hex"
    BASE64 = "base64"


class OutputFormat(Enum):
    """How decoded records are printed."""

    TEXT = "text"
    JSON = "json"


class InputConfig(FrozenBaseModel):
    """Input settings."""

    encoding: InputEncoding = InputEncoding.HEX


class OutputConfig(FrozenBaseModel):
    """Output settings."""

    format: OutputFormat = OutputFormat.TEXT
    keytag: bool = True


class LoggingConfig(FrozenBaseModel):
    """Extra log destinations, in addition to stderr."""

    syslog: bool = False
    filelog: bool = False
    filelog_dir: str = "."


class RDToolsConfig(FrozenBaseModel):
    """
    Configuration object.

    Example:
    -------
        input:
          encoding: hex
        output:
          format: text
          keytag: true
        logging:
          syslog: false
          filelog: false
    """

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def update(self, data: dict[str, Any]) -> RDToolsConfig:
        """Merge-update configuration sections on the fly (used for command line overrides)."""
        _config = self.model_dump(mode="json")
        for k, v in data.items():
            logger.debug(f"Updating config section {k} with {v}")
            _config[k].update(v)
        return self.from_dict(_config)

    @classmethod
    def from_yaml(cls, stream: BufferedReader | StringIO) -> RDToolsConfig:
        """Load configuration from a YAML stream."""
        config = yaml.safe_load(stream)
        return cls.from_dict(config or {})

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> RDToolsConfig:
        return cls.model_validate(config)


def get_config(filename: str | None) -> RDToolsConfig:
    """Top-level function to load configuration, or return a default RDToolsConfig instance."""
    if not filename:
        logger.info("No configuration filename provided, using default configuration.")
        return RDToolsConfig()
    with open(filename, "rb") as fd:
        logger.info("Loading configuration from file %s", filename)
        return RDToolsConfig.from_yaml(fd)
