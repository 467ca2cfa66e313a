"""Shared helper functions used by route handlers."""

from .cart import (
    parse_submission,
    read_file_entries,
    resolve_addons,
    run_build_cart_item_data,
    run_validate,
)

__all__ = [
    "parse_submission",
    "read_file_entries",
    "resolve_addons",
    "run_build_cart_item_data",
    "run_validate",
]
