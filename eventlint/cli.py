"""Command-line interface for eventlint."""

import logging
import sys

import click

from .output.formatter import format_validation_result
from .schema.errors import SchemaLoadError, SchemaValidationError, UnknownProcessError
from .validators.base import ProblemCode
from .validators.runner import validate_model_file

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="EVENTLINT_LOG_LEVEL",
    show_default=True,
    help="Logging level for diagnostics on stderr",
)
def main(log_level: str):
    """eventlint: checks process event definitions before deployment."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("model_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    envvar="EVENTLINT_FORMAT",
    help="Output format",
)
@click.option(
    "--process",
    "process_ids",
    multiple=True,
    help="Only validate this process id (repeatable)",
)
def validate(model_file: str, output_format: str, process_ids: tuple[str, ...]):
    """Validate the event definitions of a process model file.

    MODEL_FILE is the path to a YAML process definition.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File, schema or process selection error
    """
    try:
        result = validate_model_file(model_file, process_ids=process_ids or None)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    except UnknownProcessError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    sys.exit(1 if result.has_errors else 0)


@main.command()
def codes():
    """List the problem codes this tool can report."""
    for code in ProblemCode:
        click.echo(code.value)


if __name__ == "__main__":
    main()
