"""CLI command modules."""
from . import auth, cards

__all__ = ["auth", "cards"]
