"""Response rendering for the CLI."""
from __future__ import annotations

from rich.console import Console

from ..models.base import ExtendModel

console = Console()


def print_response(response: ExtendModel) -> None:
    """Print a response as pretty JSON with the API's field names."""
    console.print_json(data=response.to_dict())
