"""Public package entrypoint for the AddonShift engine.

This package provides a stable import surface for product addon validation
and cart item data derivation, plus optional frontend adapters (CLI and
FastAPI server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AddonDefinition": ("addonshift.core", "AddonDefinition"),
    "AddonRequest": ("addonshift.core", "AddonRequest"),
    "CartItemData": ("addonshift.core", "CartItemData"),
    "app": ("addonshift.server.main", "app"),
    "build_cart_item_data": ("addonshift.core", "build_cart_item_data"),
    "create_app": ("addonshift.server.main", "create_app"),
    "create_field": ("addonshift.core", "create_field"),
    "validate_addons": ("addonshift.core", "validate_addons"),
}

try:
    __version__ = version("addonshift")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "AddonDefinition",
    "AddonRequest",
    "CartItemData",
    "__version__",
    "app",
    "build_cart_item_data",
    "create_app",
    "create_field",
    "validate_addons",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
