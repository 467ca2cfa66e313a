"""Posted addon values and files for one submission."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .canonical.entities import AddonDefinition, FileEntry
from .fields.base import request_key_for


@dataclass(frozen=True)
class AddonRequest:
    values: Mapping[str, Any] = field(default_factory=dict)
    files: Mapping[str, FileEntry] = field(default_factory=dict)

    def value_for(self, addon: AddonDefinition) -> Any:
        key = request_key_for(addon)
        if key in self.values:
            return self.values[key]
        return self.values.get(addon.field_name)

    def file_for(self, addon: AddonDefinition) -> FileEntry | None:
        key = request_key_for(addon)
        if key in self.files:
            return self.files[key]
        return self.files.get(addon.field_name)


__all__ = ["AddonRequest"]
