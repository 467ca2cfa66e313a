"""Checkbox, radio button and select addons."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from ..canonical.entities import AddonOption, CartItemData
from ..errors import MalformedInput, RequiredFieldMissing
from ..sanitize import sanitize_title
from .base import Field

logger = logging.getLogger(__name__)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, Mapping))


def _as_list(value: Any) -> list[Any]:
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def selected_labels(value: Any, *, strict: bool = False) -> list[str]:
    """Flatten a posted selection into lowercased labels.

    When the first element is itself a sequence only that inner sequence is
    kept; its siblings are discarded. Strict mode rejects such input instead.
    """
    values = _as_list(value)

    if values and _is_sequence(values[0]):
        if strict:
            raise MalformedInput("Nested selections are not accepted.")
        if len(values) > 1:
            logger.debug("Discarding %d sibling selection(s) after nested value.", len(values) - 1)
        values = _as_list(values[0])

    labels: list[str] = []
    for item in values:
        if item is None:
            continue
        if _is_sequence(item):
            if strict:
                raise MalformedInput("Nested selections are not accepted.")
            continue
        labels.append(str(item).lower())
    return labels


class ListField(Field):
    def validate(self) -> None:
        if self.addon.required and not self.value:
            raise RequiredFieldMissing(self.addon.name, field_name=self.addon.field_name)

        if self.strict and self.value:
            for option in self._matched_options():
                self.get_option_price(option)

    def get_cart_item_data(self) -> list[CartItemData]:
        if not self.value:
            return []

        return [
            self._record(
                value=option.label,
                display=option.label,
                price=self.get_option_price(option),
                price_type=option.price_type,
            )
            for option in self._matched_options()
        ]

    def _matched_options(self) -> list[AddonOption]:
        selected = set(selected_labels(self.value, strict=self.strict))
        return [option for option in self.addon.options if sanitize_title(option.label).lower() in selected]


__all__ = ["ListField", "selected_labels"]
