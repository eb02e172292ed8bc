"""Configuration and report loading for fielderrors.

This module provides the ConfigLoader class for loading converter settings
from YAML files, and for reading validation reports stored as JSON or YAML.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from fielderrors.config.defaults import OUTPUT_FORMAT_ENV_VAR
from fielderrors.config.validator import flatten_pydantic_errors
from fielderrors.converter.report_converter import ReportConverter, make_converter
from fielderrors.lib.errors import ConfigError, FileNotFoundError, ReportError
from fielderrors.models.config import ConverterConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads converter configuration and report documents from disk.

    Responsible for:
    - Parsing YAML (and therefore JSON) files
    - Validating converter settings against ConverterConfig
    - Applying the output format environment override
    - Converting validation errors into human-readable messages
    """

    def parse_yaml(self, file_path: str) -> Any:
        """Parse a YAML or JSON file.

        Args:
            file_path: Path to the file to parse

        Returns:
            Parsed document, or an empty dict if the file is empty

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If YAML parsing fails
        """
        path = Path(file_path)

        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
                return content if content is not None else {}
        except OSError as e:
            raise FileNotFoundError(
                file_path,
                f"File not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

    def load(
        self,
        file_path: str,
        env_vars: os._Environ[str] | dict[str, str] | None = None,
    ) -> ConverterConfig:
        """Load and validate converter settings from YAML.

        Args:
            file_path: Path to the configuration file
            env_vars: Environment mapping (defaults to os.environ)

        Returns:
            Validated ConverterConfig instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigError: If parsing or validation fails
        """
        content = self.parse_yaml(file_path)
        if not isinstance(content, dict):
            raise ConfigError(
                "converter_validation",
                f"Invalid converter configuration in {file_path}: "
                f"expected a mapping, got {type(content).__name__}",
            )

        env = os.environ if env_vars is None else env_vars
        override = env.get(OUTPUT_FORMAT_ENV_VAR)
        if override:
            logger.debug(
                f"Overriding output_format with {OUTPUT_FORMAT_ENV_VAR}={override}"
            )
            content = {**content, "output_format": override}

        try:
            config = ConverterConfig.model_validate(content)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                "converter_validation",
                f"Invalid converter configuration in {file_path}:\n{error_text}",
            ) from e

        logger.debug(f"Loaded converter configuration from {file_path}")
        return config

    def load_report(self, file_path: str) -> Any:
        """Read a validation report document.

        Args:
            file_path: Path to a JSON or YAML report

        Returns:
            The decoded report mapping

        Raises:
            FileNotFoundError: If the file doesn't exist
            ReportError: If the document is not a mapping
        """
        try:
            content = self.parse_yaml(file_path)
        except ConfigError as e:
            raise ReportError(f"Failed to parse report {file_path}: {e}") from e

        if not isinstance(content, dict):
            raise ReportError(
                f"Report {file_path} must be a mapping, "
                f"got {type(content).__name__}"
            )
        return content


def load_converter(file_path: str) -> ReportConverter:
    """Build a converter from a configuration file.

    Args:
        file_path: Path to the configuration file

    Returns:
        ReportConverter configured as described by the file
    """
    config = ConfigLoader().load(file_path)
    return make_converter(config.to_configuration(), config.output_format)
