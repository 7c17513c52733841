"""Command-line interface."""

from settings_store.cli.arguments import parse_arguments, parse_value

__all__ = [
    "parse_arguments",
    "parse_value",
]
