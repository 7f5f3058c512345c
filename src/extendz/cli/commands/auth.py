"""Account commands."""
from __future__ import annotations

import click

from ..context import api_errors, get_client
from ..output import print_response


@click.command("forgot-password")
@click.option("--email", "-e", help="the account email (default: $EXTEND_EMAIL)")
@click.pass_context
@api_errors
def forgot_password(ctx, email: str | None):
    """Send a password reset email.

    Like every command this signs in first, so EXTEND_EMAIL and
    EXTEND_PASSWORD must still be valid. Use the Extend web app to reset a
    password you no longer know.
    """
    client = get_client(ctx)
    email = email or ctx.find_root().obj["settings"].email
    print_response(client.forgot_password(email))
