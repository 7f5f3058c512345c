"""
extendz CLI main entry point.

Usage:
    extendz [OPTIONS] COMMAND [ARGS]...

Credentials are read from the EXTEND_EMAIL and EXTEND_PASSWORD environment
variables.
"""
from __future__ import annotations

import logging

import click
from pydantic import ValidationError

from .. import __version__
from ..config import load_settings
from ..logging_config import setup_logging
from .commands import auth, cards

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.version_option(__version__, prog_name="extendz")
@click.option("--api-url", envvar="EXTEND_API_BASE_URL", help="Extend API base URL")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Log level (default: $EXTEND_LOG_LEVEL or WARNING)",
)
@click.option("--log-json", is_flag=True, default=False, help="Emit logs as JSON")
@click.pass_context
def cli(ctx, api_url: str | None, log_level: str | None, log_json: bool):
    """A tool for interacting with the Extend API."""
    ctx.ensure_object(dict)

    try:
        settings = load_settings(
            api_base_url=api_url,
            log_level=log_level,
            log_json=log_json or None,
        )
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        ctx.exit(1)

    setup_logging(settings.log_level, settings.log_json)
    ctx.obj["settings"] = settings


for command in cards.COMMANDS:
    cli.add_command(command)
cli.add_command(auth.forgot_password)


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
