"""Virtual card commands."""
from __future__ import annotations

import click

from ...models.requests import (
    CreateVirtualCardRequest,
    UpdateVirtualCardRequest,
    VirtualCardPageableRequest,
)
from ..context import api_errors, get_client, parse_request
from ..output import print_response

DOCS = "https://developer.paywithextend.com/"

id_option = click.option("--id", "-i", "virtual_card_id", required=True, help="the virtual card ID")


@click.command("get-user-virtual-cards")
@click.option(
    "--request",
    "-r",
    "raw_request",
    help=f"the {DOCS}#tocS_VirtualCardPageableRequest JSON",
)
@click.pass_context
@api_errors
def get_user_virtual_cards(ctx, raw_request: str | None):
    """Get the virtual cards for a user."""
    request = None
    if raw_request:
        request = parse_request(ctx, VirtualCardPageableRequest, raw_request)
    print_response(get_client(ctx).get_user_virtual_cards(request))


@click.command("get-virtual-card")
@id_option
@click.pass_context
@api_errors
def get_virtual_card(ctx, virtual_card_id: str):
    """Get a virtual card."""
    print_response(get_client(ctx).get_virtual_card(virtual_card_id))


@click.command("get-virtual-card-transactions")
@id_option
@click.option("--count", "-c", type=int, default=0, help="the number of transactions to get (1-500)")
@click.option("--before", "-b", default="", help="get transactions before timestamp")
@click.option("--after", "-a", default="", help="get transactions after timestamp")
@click.option("--status", "-s", default="", help="the comma-delimited list of transaction statuses to get")
@click.pass_context
@api_errors
def get_virtual_card_transactions(
    ctx, virtual_card_id: str, count: int, before: str, after: str, status: str
):
    """Get the transactions for a virtual card."""
    response = get_client(ctx).get_virtual_card_transactions(
        virtual_card_id, count, before, after, status
    )
    print_response(response)


@click.command("create-virtual-card")
@click.option(
    "--request",
    "-r",
    "raw_request",
    required=True,
    help=f"the {DOCS}#tocS_CreateVirtualCardRequest JSON",
)
@click.pass_context
@api_errors
def create_virtual_card(ctx, raw_request: str):
    """Create a virtual card."""
    request = parse_request(ctx, CreateVirtualCardRequest, raw_request)
    print_response(get_client(ctx).create_virtual_card(request))


@click.command("update-virtual-card")
@id_option
@click.option(
    "--request",
    "-r",
    "raw_request",
    required=True,
    help=f"the {DOCS}#tocS_UpdateVirtualCardRequest JSON",
)
@click.pass_context
@api_errors
def update_virtual_card(ctx, virtual_card_id: str, raw_request: str):
    """Update a virtual card."""
    request = parse_request(ctx, UpdateVirtualCardRequest, raw_request)
    print_response(get_client(ctx).update_virtual_card(virtual_card_id, request))


@click.command("cancel-virtual-card")
@id_option
@click.confirmation_option(prompt="Are you sure you want to permanently cancel this card?")
@click.pass_context
@api_errors
def cancel_virtual_card(ctx, virtual_card_id: str):
    """Cancel a virtual card (permanent).

    Asks for confirmation first; pass --yes when running from a script.
    """
    print_response(get_client(ctx).cancel_virtual_card(virtual_card_id))


@click.command("reject-virtual-card")
@id_option
@click.pass_context
@api_errors
def reject_virtual_card(ctx, virtual_card_id: str):
    """Reject a virtual card."""
    print_response(get_client(ctx).reject_virtual_card(virtual_card_id))


COMMANDS = [
    get_user_virtual_cards,
    get_virtual_card,
    get_virtual_card_transactions,
    create_virtual_card,
    update_virtual_card,
    cancel_virtual_card,
    reject_virtual_card,
]
