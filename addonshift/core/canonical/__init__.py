from .entities import (
    AddonDefinition,
    AddonOption,
    CartItemData,
    FileEntry,
    PriceInput,
    PriceType,
)
from .helpers import addon_from_payload, addons_from_payload, option_from_payload

__all__ = [
    "AddonDefinition",
    "AddonOption",
    "CartItemData",
    "FileEntry",
    "PriceInput",
    "PriceType",
    "addon_from_payload",
    "addons_from_payload",
    "option_from_payload",
]
