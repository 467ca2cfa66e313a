"""File upload addons."""

from __future__ import annotations

from decimal import Decimal
import logging
from pathlib import PurePosixPath
from typing import Any

from ..canonical.entities import AddonDefinition, CartItemData, FileEntry
from ..errors import FileTooLarge, RequiredFieldMissing, UploadFailed
from ..pricing import PriceContext
from ..sanitize import sanitize_text
from ..uploads.local import Uploader
from ..uploads.paths import make_path_rewriter
from ..uploads.policy import MaxUploadSizePolicy, SizePolicy
from .base import Field

logger = logging.getLogger(__name__)


def _basename(locator: str) -> str:
    return PurePosixPath(locator).name


class FileUploadField(Field):
    """A single uploaded file, stored through ``uploader``.

    ``value`` holds a previously stored locator, used when no new file is
    posted. With ``test=True`` the field never stores anything.
    """

    def __init__(
        self,
        addon: AddonDefinition,
        value: Any = None,
        *,
        file_entry: FileEntry | None = None,
        uploader: Uploader | None = None,
        size_policy: SizePolicy | None = None,
        customer_id: str | None = None,
        test: bool = False,
        price_context: PriceContext | None = None,
        strict: bool = False,
    ) -> None:
        super().__init__(addon, value, price_context=price_context, strict=strict)
        self.file_entry = file_entry
        self.uploader = uploader
        self.size_policy = size_policy or MaxUploadSizePolicy()
        self.customer_id = customer_id
        self.test = test

    def has_file(self) -> bool:
        return self.file_entry is not None and bool(self.file_entry.name)

    def validate(self) -> None:
        if self.addon.required and not self.has_file():
            raise RequiredFieldMissing(self.addon.name, field_name=self.addon.field_name)

        if self.file_entry is not None and self.size_policy.is_over_limit(self.file_entry):
            raise FileTooLarge(field_name=self.addon.field_name)

        if self.strict and self.addon.adjust_price:
            self.get_addon_price()

    def get_cart_item_data(self) -> list[CartItemData]:
        price = self.get_addon_price() if self.addon.adjust_price else Decimal("0")

        if self.has_file() and not self.test:
            locator = self.handle_upload()
            return [
                self._record(
                    value=locator,
                    display=_basename(locator),
                    price=price,
                    price_type=self.addon.price_type,
                )
            ]

        if self.value:
            value = sanitize_text(self.value)
            return [
                self._record(
                    value=value,
                    display=_basename(value),
                    price=price,
                    price_type=self.addon.price_type,
                )
            ]

        return []

    def handle_upload(self) -> str:
        if self.uploader is None:
            raise UploadFailed("No uploader is configured for file uploads.", field_name=self.addon.field_name)

        path_rewriter = make_path_rewriter(self.customer_id) if self.customer_id is not None else None
        try:
            result = self.uploader.store(self.file_entry, path_rewriter=path_rewriter)
        except OSError as exc:
            raise UploadFailed(str(exc), field_name=self.addon.field_name) from exc

        if result.error or not result.file:
            raise UploadFailed(result.error or "Upload failed.", field_name=self.addon.field_name)

        logger.debug("Stored upload for %s at %s", self.addon.field_name, result.file)
        return sanitize_text(result.url)


__all__ = ["FileUploadField"]
