"""Helpers shared by the CLI commands."""

import json
import logging
import sys
from typing import Any, Callable, NoReturn, TypeVar

import click
import httpx
from botocore.exceptions import BotoCoreError, ClientError

from ..exceptions import BridgeError
from ..models.config import BridgeConfig
from ..services import BridgeService
from ..utils import setup_logging
from ..utils.error_handling import handle_generic_error, handle_http_error, handle_storage_error

T = TypeVar("T")


def load_config(ctx: click.Context, use_wrapping: bool = False) -> BridgeConfig:
    """Set up logging and load settings from the group options."""
    setup_logging(ctx.obj["debug"], use_wrapping=use_wrapping)
    try:
        config = BridgeConfig.from_sources(ctx.obj["config"])
    except BridgeError as e:
        fail(str(e))
    if ctx.obj["max_workers"] is not None:
        config.max_workers = ctx.obj["max_workers"]
    return config


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def echo_json(payload: Any) -> None:
    """Print a JSON document to stdout."""
    click.echo(json.dumps(payload, indent=2))


def run_operation(config: BridgeConfig, operation: str, func: Callable[[BridgeService], T]) -> T:
    """
    Run an operation against a service built from config.

    Errors are logged in the standard way and turn into exit status 1.
    """
    try:
        with BridgeService.from_config(config) as service:
            return func(service)
    except httpx.HTTPError as e:
        handle_http_error(e, operation)
        sys.exit(1)
    except (BotoCoreError, ClientError) as e:
        handle_storage_error(e, operation)
        sys.exit(1)
    except BridgeError as e:
        logging.error("%s failed: %s", operation.capitalize(), e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        handle_generic_error(e, operation)
        sys.exit(1)


__all__ = ["load_config", "fail", "echo_json", "run_operation"]
