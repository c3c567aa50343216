"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
import requests.exceptions
from pydantic import ValidationError

from queue_dashboard.calculators.time_utils import InvalidTimestampError
from queue_dashboard.cli.utils.formatters import format_error, format_warning
from queue_dashboard.services.error_classifier import status_code_of
from queue_dashboard.services.errors import (
    CircuitBreakerError,
    RetryExhaustedException,
    SuriApiError,
)

EXIT_CONFIGURATION = 1
EXIT_API = 2
EXIT_VALIDATION = 3
EXIT_ABORTED = 130
EXIT_UNEXPECTED = 255


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Missing or invalid settings."""

    pass


class APIError(CLIError):
    """The Suri API could not be reached or rejected the request."""

    pass


class DataValidationError(CLIError):
    """Invalid user input, such as a malformed timestamp."""

    pass


def _api_hint(status_code: Optional[int]) -> str:
    if status_code in (401, 403):
        return "Check SURI_API_KEY in your .env file"
    if status_code == 404:
        return "Check SURI_API_URL in your .env file"
    if status_code == 429:
        return "The API is rate limiting requests; raise REFRESH_INTERVAL"
    return "Check your network connection and the API status"


def _echo(message: str, hint: Optional[str]) -> None:
    click.echo(format_error(message))
    if hint:
        click.echo(format_warning(f"Hint: {hint}"))


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Print a user-friendly message for ``error`` and pick the exit code.

    Returns:
        1 configuration, 2 API, 3 validation, 130 abort, 255 anything else
    """
    if isinstance(error, ConfigurationError):
        _echo(f"Configuration Error: {error.message}", error.recovery_hint)
        return EXIT_CONFIGURATION

    if isinstance(error, APIError):
        _echo(f"API Error: {error.message}", error.recovery_hint)
        return EXIT_API

    if isinstance(error, DataValidationError):
        _echo(f"Data Validation Error: {error.message}", error.recovery_hint)
        return EXIT_VALIDATION

    if isinstance(error, ValidationError):
        _echo(
            f"Configuration Error: {error.error_count()} invalid setting(s)",
            "Check the values in your .env file",
        )
        if debug:
            click.echo(str(error))
        return EXIT_CONFIGURATION

    if isinstance(
        error,
        (
            SuriApiError,
            RetryExhaustedException,
            CircuitBreakerError,
            requests.exceptions.RequestException,
        ),
    ):
        status_code = status_code_of(error)
        label = f" (HTTP {status_code})" if status_code else ""
        _echo(f"API Error{label}: {error}", _api_hint(status_code))
        return EXIT_API

    if isinstance(error, InvalidTimestampError):
        _echo(f"Data Validation Error: {error}", "Use ISO-8601, e.g. 2024-03-04T09:30:00Z")
        return EXIT_VALIDATION

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return EXIT_ABORTED

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))
    if debug:
        click.echo("\nFull stack trace:")
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))
    return EXIT_UNEXPECTED


class with_error_handling:
    """
    Context manager that turns exceptions into messages and exit codes.

    Example:
        @click.command()
        @click.option("--debug", is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                ...
    """

    def __init__(self, debug: bool = False):
        self.debug = debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is None or isinstance(exc_val, (SystemExit, click.exceptions.Exit)):
            return False
        if isinstance(exc_val, KeyboardInterrupt):
            exc_val = click.Abort()
        if not isinstance(exc_val, Exception):
            return False
        sys.exit(handle_cli_error(exc_val, self.debug))
