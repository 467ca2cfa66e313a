from decimal import Decimal
from typing import Any

from babel.numbers import get_currency_symbol

from ...config import get_settings
from ...core.canonical.entities import CartItemData

_DEFAULT_VALUE_LIMITS = {
    "low": 40,
    "medium": 80,
    "high": 160,
}
_SUPPORTED_VERBOSITIES = {"low", "medium", "high", "extrahigh"}


def _truncate_value(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in _SUPPORTED_VERBOSITIES:
        return normalized
    return "medium"


def _format_number(value: Decimal | float | int | None) -> str:
    if value is None:
        return ""
    return f"{float(value):.2f}".rstrip("0").rstrip(".")


def _format_price(value: Decimal | None, currency: str | None) -> str:
    if value is None:
        return ""
    number = _format_number(value)

    symbol = ""
    currency_code = str(currency or "").upper()
    if currency_code:
        try:
            symbol = get_currency_symbol(currency_code, locale="en_US")
        except Exception:
            symbol = currency_code

    if symbol:
        if symbol.isalpha():
            return f"{number} {symbol}"
        return f"{number}{symbol}"
    return number


def cart_items_to_loggable(
    items: list[CartItemData],
    *,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
    currency: str | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)
    resolved_currency = currency if currency is not None else settings.store_currency

    if level == "extrahigh":
        return {"items": [item.to_dict() for item in items]}

    total = sum((item.price for item in items), Decimal("0"))

    if level == "low":
        return {
            "count": len(items),
            "total": _format_price(total, resolved_currency),
        }

    limit = _DEFAULT_VALUE_LIMITS[level]
    summary_items: list[dict[str, Any]] = []
    for item in items:
        entry = {
            "name": item.name,
            "display": _truncate_value(item.display, limit=limit),
            "price": _format_price(item.price, resolved_currency),
            "price_type": item.price_type,
        }
        if level == "high":
            entry["field_name"] = item.field_name
            entry["field_type"] = item.field_type
            entry["value"] = _truncate_value(item.value, limit=limit)
        summary_items.append(entry)

    return {
        "count": len(items),
        "total": _format_price(total, resolved_currency),
        "items": summary_items,
    }


__all__ = ["cart_items_to_loggable"]
