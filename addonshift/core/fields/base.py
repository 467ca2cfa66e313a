"""Shared behavior for addon field types."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..canonical.entities import AddonDefinition, AddonOption, CartItemData
from ..pricing import PriceContext, price_for
from ..sanitize import sanitize_text, sanitize_title

REQUEST_KEY_PREFIX = "addon-"


def request_key_for(addon: AddonDefinition) -> str:
    """Name under which the storefront posts the value of ``addon``."""
    return f"{REQUEST_KEY_PREFIX}{sanitize_title(addon.field_name)}"


class Field:
    """One addon field for the duration of a single submission.

    Call :meth:`validate` first; :meth:`get_cart_item_data` assumes the value
    already passed validation.
    """

    def __init__(
        self,
        addon: AddonDefinition,
        value: Any = None,
        *,
        price_context: PriceContext | None = None,
        strict: bool = False,
    ) -> None:
        self.addon = addon
        self.value = value
        self.price_context = price_context
        self.strict = strict

    @property
    def request_key(self) -> str:
        return request_key_for(self.addon)

    def validate(self) -> None:
        raise NotImplementedError

    def get_cart_item_data(self) -> list[CartItemData]:
        raise NotImplementedError

    def get_option_price(self, option: AddonOption) -> Decimal:
        return price_for(option.price, option.price_type, self.price_context, strict=self.strict)

    def get_addon_price(self) -> Decimal:
        return price_for(self.addon.price, self.addon.price_type, self.price_context, strict=self.strict)

    def _record(self, *, value: str, display: str, price: Decimal, price_type: str) -> CartItemData:
        return CartItemData(
            name=sanitize_text(self.addon.name),
            value=value,
            display=display,
            price=price,
            field_name=self.addon.field_name,
            field_type=self.addon.type,
            price_type=price_type,
        )


__all__ = ["REQUEST_KEY_PREFIX", "Field", "request_key_for"]
