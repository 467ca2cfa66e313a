"""Registry mapping addon types to field implementations."""


from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .canonical.entities import AddonDefinition, FileEntry
from .fields.base import Field
from .fields.file_upload import FileUploadField
from .fields.list_field import ListField
from .pricing import PriceContext
from .uploads.local import Uploader
from .uploads.policy import SizePolicy


@dataclass(frozen=True)
class FieldContext:
    """Per-submission collaborators handed to field factories."""

    file_entry: FileEntry | None = None
    uploader: Uploader | None = None
    size_policy: SizePolicy | None = None
    customer_id: str | None = None
    test: bool = False
    price_context: PriceContext | None = None
    strict: bool = False


FieldFactory = Callable[[AddonDefinition, Any, FieldContext], Field]


def _list_field(addon: AddonDefinition, value: Any, context: FieldContext) -> Field:
    return ListField(addon, value, price_context=context.price_context, strict=context.strict)


def _file_upload_field(addon: AddonDefinition, value: Any, context: FieldContext) -> Field:
    return FileUploadField(
        addon,
        value,
        file_entry=context.file_entry,
        uploader=context.uploader,
        size_policy=context.size_policy,
        customer_id=context.customer_id,
        test=context.test,
        price_context=context.price_context,
        strict=context.strict,
    )


@dataclass
class Registry:
    fields: dict[str, FieldFactory] = field(default_factory=dict)

    def register_field(self, addon_type: str, factory: FieldFactory) -> None:
        self.fields[str(addon_type).strip().lower()] = factory

    def get_field_factory(self, addon_type: str) -> FieldFactory:
        normalized = str(addon_type).strip().lower()
        factory = self.fields.get(normalized)
        if factory is None:
            raise KeyError(f"No field registered for addon type: {normalized}")
        return factory

    def list_field_types(self) -> list[str]:
        return sorted(self.fields.keys())


_registry = Registry()


def register_field(addon_type: str, factory: FieldFactory) -> None:
    _registry.register_field(addon_type, factory)


def get_field_factory(addon_type: str) -> FieldFactory:
    return _registry.get_field_factory(addon_type)


def list_field_types() -> list[str]:
    return _registry.list_field_types()


def create_field(addon: AddonDefinition, value: Any = None, context: FieldContext | None = None) -> Field:
    factory = get_field_factory(addon.type)
    return factory(addon, value, context or FieldContext())


def _register_defaults() -> None:
    for addon_type in ("checkbox", "multiple_choice", "radiobutton", "select"):
        if addon_type not in _registry.fields:
            _registry.register_field(addon_type, _list_field)
    if "file_upload" not in _registry.fields:
        _registry.register_field("file_upload", _file_upload_field)


_register_defaults()


__all__ = [
    "FieldContext",
    "FieldFactory",
    "Registry",
    "create_field",
    "get_field_factory",
    "list_field_types",
    "register_field",
]
