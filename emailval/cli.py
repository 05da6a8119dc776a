"""
Command line entry point.

Runs the interactive prompt by default, or validates a single address with
``--check`` for use in scripts.
"""

from pathlib import Path
from typing import Any, Optional

import typer

from .config.loader import ConfigLoader
from .errors import AttemptsExhaustedError, ConfigurationError, InputReadError
from .logging.config import configure_logging, get_logger
from .prompt import EmailPrompt
from .validation import EmailValidator

app = typer.Typer(add_completion=False, help="Validate an email address format.")

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _cli_overrides(log_level: Optional[str], log_json: bool) -> dict[str, Any]:
    logging_overrides: dict[str, Any] = {}
    if log_level is not None:
        logging_overrides["level"] = log_level
    if log_json:
        logging_overrides["format_json"] = True
    return {"logging": logging_overrides} if logging_overrides else {}


@app.command()
def main(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML configuration file."
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    ),
    log_json: bool = typer.Option(False, "--log-json", help="Emit logs as JSON."),
    check: Optional[str] = typer.Option(
        None, "--check", help="Validate ADDRESS and exit instead of prompting."
    ),
) -> None:
    """Prompt for an email address until a valid one is entered."""
    try:
        settings = ConfigLoader.create(config).load(_cli_overrides(log_level, log_json))
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    configure_logging(level=settings.logging.level, format_json=settings.logging.format_json)
    logger = get_logger(__name__)
    validator = EmailValidator(settings.rules)

    if check is not None:
        result = validator.check(check)
        if result.valid:
            typer.echo(f"✓ Valid email address: {check}")
            raise typer.Exit(code=EXIT_OK)
        logger.info("Address rejected", rule=result.failed_rule.value)
        typer.echo(f"✗ Invalid email address: {check}")
        raise typer.Exit(code=EXIT_INPUT_ERROR)

    typer.echo("=== Email Address Validation Program ===")
    typer.echo("This program will validate your email address format.\n")

    prompt = EmailPrompt(validator=validator, settings=settings.prompt)
    try:
        email = prompt.read_email()
    except (InputReadError, AttemptsExhaustedError) as e:
        logger.error("Program terminated", error=str(e))
        typer.echo("\nProgram terminated due to input error.")
        raise typer.Exit(code=EXIT_INPUT_ERROR)

    typer.echo(f"\nSuccess! Your email '{email}' has been validated and stored.")


def run() -> None:
    """Console script entry point."""
    app()
