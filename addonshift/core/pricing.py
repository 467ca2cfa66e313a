"""Price resolution for addon values and options."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import math
import re
from typing import Any

from .errors import MalformedInput

_MONEY_SANITIZE_RE = re.compile(r"[^\d\.\-]")
_ZERO = Decimal("0")

FLAT_PRICE_TYPES = frozenset({"flat_fee", "flat"})
PERCENTAGE_PRICE_TYPES = frozenset({"percentage_based", "percent", "percentage"})
QUANTITY_PRICE_TYPES = frozenset({"quantity_based", "per_unit", "quantity"})


@dataclass(frozen=True)
class PriceContext:
    """Line item figures a price type may depend on."""

    base_amount: Any = None
    quantity: int = 1


def parse_decimal_money(value: Any) -> Decimal | None:
    if value is None:
        return None

    if isinstance(value, bool):
        return Decimal(int(value))

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, int):
        return Decimal(str(value))

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        try:
            parsed = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return None
        return parsed if parsed.is_finite() else None

    if isinstance(value, str):
        cleaned = _MONEY_SANITIZE_RE.sub("", value.strip().replace(",", ""))
        if cleaned in {"", "-", ".", "-."}:
            return None
        try:
            parsed = Decimal(cleaned)
        except InvalidOperation:
            return None
        return parsed if parsed.is_finite() else None

    return None


def coerce_amount(value: Any, *, strict: bool = False) -> Decimal:
    """Parse ``value`` as money, falling back to zero.

    Empty values are always zero. In strict mode anything else that does not
    parse raises :class:`MalformedInput`.
    """
    parsed = parse_decimal_money(value)
    if parsed is not None:
        return parsed
    if strict and not _is_blank(value):
        raise MalformedInput(f"Not a valid amount: {value!r}")
    return _ZERO


def normalize_price_type(price_type: Any) -> str:
    normalized = str(price_type or "").strip().lower()
    if normalized in PERCENTAGE_PRICE_TYPES:
        return "percentage_based"
    if normalized in QUANTITY_PRICE_TYPES:
        return "quantity_based"
    return "flat_fee"


def resolve_price(
    price: Any,
    price_type: Any,
    *,
    base_amount: Any = None,
    quantity: Any = 1,
    strict: bool = False,
) -> Decimal:
    amount = coerce_amount(price, strict=strict)
    kind = normalize_price_type(price_type)

    if kind == "percentage_based":
        base = coerce_amount(base_amount, strict=strict)
        return base * amount / Decimal(100)
    if kind == "quantity_based":
        return amount * coerce_amount(quantity, strict=strict)
    return amount


def price_for(
    price: Any,
    price_type: Any,
    context: PriceContext | None,
    *,
    strict: bool = False,
) -> Decimal:
    """Resolve against ``context``; without one the literal amount is kept."""
    if context is None:
        return coerce_amount(price, strict=strict)
    return resolve_price(
        price,
        price_type,
        base_amount=context.base_amount,
        quantity=context.quantity,
        strict=strict,
    )


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


__all__ = [
    "FLAT_PRICE_TYPES",
    "PERCENTAGE_PRICE_TYPES",
    "QUANTITY_PRICE_TYPES",
    "PriceContext",
    "coerce_amount",
    "normalize_price_type",
    "parse_decimal_money",
    "price_for",
    "resolve_price",
]
