from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Literal

PriceType = Literal["flat_fee", "quantity_based", "percentage_based"]
PriceInput = Decimal | int | float | str | None


@dataclass(frozen=True)
class AddonOption:
    label: str
    price: PriceInput = None
    price_type: str = "flat_fee"
    label_2: str | None = None  # secondary caption shown under the label
    image: str | None = None


@dataclass(frozen=True)
class AddonDefinition:
    name: str
    field_name: str
    type: str
    required: bool = False
    price: PriceInput = None
    price_type: str = "flat_fee"
    adjust_price: bool = False
    options: tuple[AddonOption, ...] = ()
    description: str | None = None
    display: str | None = None  # select, radiobutton or images for list fields
    title_format: str | None = None
    position: int = 0
    min: float | None = None
    max: float | None = None
    restrictions: bool = False
    restrictions_type: str | None = None

    def __post_init__(self) -> None:
        options = tuple(
            option if isinstance(option, AddonOption) else AddonOption(**option)
            for option in (self.options or ())
        )
        object.__setattr__(self, "options", options)
        object.__setattr__(self, "required", bool(self.required))
        object.__setattr__(self, "adjust_price", bool(self.adjust_price))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "field_name": self.field_name,
            "type": self.type,
            "required": self.required,
            "price": _price_to_json(self.price),
            "price_type": self.price_type,
            "adjust_price": self.adjust_price,
            "options": [
                {
                    "label": option.label,
                    "label_2": option.label_2,
                    "price": _price_to_json(option.price),
                    "price_type": option.price_type,
                    "image": option.image,
                }
                for option in self.options
            ],
            "description": self.description,
            "display": self.display,
            "title_format": self.title_format,
            "position": self.position,
            "min": self.min,
            "max": self.max,
            "restrictions": self.restrictions,
            "restrictions_type": self.restrictions_type,
        }


@dataclass(frozen=True)
class FileEntry:
    """One uploaded file, already read from the incoming request."""

    name: str
    size: int = 0
    content: bytes = b""
    content_type: str | None = None


@dataclass
class CartItemData:
    name: str
    value: str
    display: str
    price: Decimal
    field_name: str
    field_type: str
    price_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "display": self.display,
            "price": _price_to_json(self.price),
            "field_name": self.field_name,
            "field_type": self.field_type,
            "price_type": self.price_type,
        }


def _price_to_json(value: PriceInput) -> str | None:
    if value is None:
        return None
    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        text = format(value.normalize(), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text in {"", "-0"}:
            return "0"
        return text
    return str(value)


__all__ = [
    "AddonDefinition",
    "AddonOption",
    "CartItemData",
    "FileEntry",
    "PriceInput",
    "PriceType",
]
