"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "AddonDefinition": ("addonshift.core.canonical.entities", "AddonDefinition"),
    "AddonOption": ("addonshift.core.canonical.entities", "AddonOption"),
    "AddonRequest": ("addonshift.core.request", "AddonRequest"),
    "CartItemData": ("addonshift.core.canonical.entities", "CartItemData"),
    "CoreConfig": ("addonshift.core.config", "CoreConfig"),
    "FieldContext": ("addonshift.core.registry", "FieldContext"),
    "FileEntry": ("addonshift.core.canonical.entities", "FileEntry"),
    "LocalUploader": ("addonshift.core.uploads", "LocalUploader"),
    "MaxUploadSizePolicy": ("addonshift.core.uploads", "MaxUploadSizePolicy"),
    "PriceContext": ("addonshift.core.pricing", "PriceContext"),
    "addon_from_payload": ("addonshift.core.canonical.helpers", "addon_from_payload"),
    "addons_from_payload": ("addonshift.core.canonical.helpers", "addons_from_payload"),
    "build_cart_item_data": ("addonshift.core.api", "build_cart_item_data"),
    "config_from_env": ("addonshift.core.config", "config_from_env"),
    "create_field": ("addonshift.core.registry", "create_field"),
    "list_field_types": ("addonshift.core.registry", "list_field_types"),
    "register_field": ("addonshift.core.registry", "register_field"),
    "resolve_price": ("addonshift.core.pricing", "resolve_price"),
    "resolve_upload_dir": ("addonshift.core.uploads", "resolve_upload_dir"),
    "validate_addons": ("addonshift.core.api", "validate_addons"),
}

__all__ = [
    "AddonDefinition",
    "AddonOption",
    "AddonRequest",
    "CartItemData",
    "CoreConfig",
    "FieldContext",
    "FileEntry",
    "LocalUploader",
    "MaxUploadSizePolicy",
    "PriceContext",
    "addon_from_payload",
    "addons_from_payload",
    "build_cart_item_data",
    "config_from_env",
    "create_field",
    "list_field_types",
    "register_field",
    "resolve_price",
    "resolve_upload_dir",
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
