"""Build addon definitions from raw catalog payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from ..pricing import parse_decimal_money
from ..sanitize import sanitize_text, sanitize_title
from .entities import AddonDefinition, AddonOption

_FALSY_FLAGS = {"", "0", "false", "no", "off"}
_FIELD_NAME_KEYS = ("field_name", "field-name")


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = sanitize_text(value)
    return text or None


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_FLAGS
    return bool(value)


def _absint(value: Any) -> int:
    try:
        return abs(int(float(value)))
    except (TypeError, ValueError):
        return 0


def _float_or_none(value: Any) -> float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _resolve_field_name(payload: Mapping[str, Any], name: str) -> str:
    for key in _FIELD_NAME_KEYS:
        candidate = _clean_text(payload.get(key))
        if candidate:
            return candidate
    return sanitize_title(name)


def option_from_payload(payload: Mapping[str, Any]) -> AddonOption:
    return AddonOption(
        label=_clean_text(payload.get("label")) or "",
        label_2=_clean_text(payload.get("label_2")),
        price=parse_decimal_money(payload.get("price")),
        price_type=_clean_text(payload.get("price_type")) or "flat_fee",
        image=_clean_text(payload.get("image")),
    )


def addon_from_payload(payload: Mapping[str, Any]) -> AddonDefinition:
    name = _clean_text(payload.get("name"))
    if not name:
        raise ValueError("Addon payload requires a non-empty name.")

    addon_type = _clean_text(payload.get("type"))
    if not addon_type:
        raise ValueError(f'Addon "{name}" requires a type.')

    raw_options = payload.get("options")
    options: list[AddonOption] = []
    if isinstance(raw_options, (list, tuple)):
        options = [option_from_payload(item) for item in raw_options if isinstance(item, Mapping)]

    price_type = _clean_text(payload.get("price_type")) or "flat_fee"
    # Customer-defined prices are always charged per unit.
    if addon_type == "custom_price":
        price_type = "quantity_based"

    return AddonDefinition(
        name=name,
        field_name=_resolve_field_name(payload, name),
        type=addon_type,
        required=_flag(payload.get("required")),
        price=parse_decimal_money(payload.get("price")),
        price_type=price_type,
        adjust_price=_flag(payload.get("adjust_price")),
        options=tuple(options),
        description=payload.get("description") or None,
        display=_clean_text(payload.get("display")),
        title_format=_clean_text(payload.get("title_format")),
        position=_absint(payload.get("position")),
        min=_float_or_none(payload.get("min")),
        max=_float_or_none(payload.get("max")),
        restrictions=_flag(payload.get("restrictions")),
        restrictions_type=_clean_text(payload.get("restrictions_type")),
    )


def addons_from_payload(items: Iterable[Any]) -> list[AddonDefinition]:
    """Parse a catalog list, ordered by ``position`` like the storefront."""
    addons = [addon_from_payload(item) for item in items if isinstance(item, Mapping)]
    return sorted(addons, key=lambda addon: addon.position)


__all__ = ["addon_from_payload", "addons_from_payload", "option_from_payload"]
