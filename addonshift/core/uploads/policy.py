from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..canonical.entities import FileEntry
from ..config import DEFAULT_MAX_UPLOAD_SIZE


class SizePolicy(Protocol):
    def is_over_limit(self, file_entry: FileEntry) -> bool: ...


@dataclass(frozen=True)
class MaxUploadSizePolicy:
    max_bytes: int = DEFAULT_MAX_UPLOAD_SIZE

    def is_over_limit(self, file_entry: FileEntry) -> bool:
        size = file_entry.size or len(file_entry.content)
        return size > self.max_bytes


__all__ = ["MaxUploadSizePolicy", "SizePolicy"]
