"""CLI command for converting validation reports.

Implements the 'fielderrors convert' command, which reads a report from a
JSON or YAML file and prints the resulting field error map as JSON.
"""

import json
import sys
from typing import Any

import click
from pydantic import ValidationError as PydanticValidationError

from fielderrors.config.defaults import DEFAULT_OUTPUT_FORMAT
from fielderrors.config.loader import ConfigLoader
from fielderrors.config.validator import flatten_pydantic_errors
from fielderrors.converter.report_converter import make_converter
from fielderrors.lib.errors import FieldErrorsError
from fielderrors.lib.logging_config import get_logger, setup_logging
from fielderrors.models.field_error import FieldError, OutputFormat

logger = get_logger(__name__)


def _to_json(field_errors: dict[str, Any] | None) -> str:
    """Serialize a field error map, dumping structured records as objects."""
    if field_errors is None:
        return json.dumps(None)
    payload = {
        path: value.model_dump() if isinstance(value, FieldError) else value
        for path, value in field_errors.items()
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


@click.command()
@click.argument("report_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a YAML converter configuration file",
)
@click.option(
    "--template",
    default=None,
    help="Fixed message template for every field (overrides --config strategy)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=None,
    help="Output format (defaults to the config file's, else plain)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output with debug information",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only log errors",
)
def convert(
    report_file: str,
    config_file: str | None,
    template: str | None,
    output_format: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Convert a validation report into a map of field messages.

    REPORT_FILE is a JSON or YAML document with a 'details' list.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    logger.info(
        f"Convert command invoked: report={report_file}, config={config_file}, "
        f"format={output_format}"
    )

    loader = ConfigLoader()
    try:
        configuration: Any = None
        resolved_format = OutputFormat(DEFAULT_OUTPUT_FORMAT)
        if config_file:
            config = loader.load(config_file)
            configuration = config.to_configuration()
            resolved_format = config.output_format
        if template is not None:
            configuration = template
        if output_format is not None:
            resolved_format = OutputFormat(output_format)

        converter = make_converter(configuration, resolved_format)
        report = loader.load_report(report_file)
    except FieldErrorsError as e:
        logger.error(f"Conversion setup failed: {e}", exc_info=verbose)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(2)

    try:
        field_errors = converter(report)
    except PydanticValidationError as e:
        error_text = "\n".join(flatten_pydantic_errors(e))
        logger.error(f"Malformed report {report_file}: {error_text}")
        click.secho(
            f"Error: malformed report {report_file}:\n{error_text}",
            fg="red",
            err=True,
        )
        sys.exit(2)

    click.echo(_to_json(field_errors))
