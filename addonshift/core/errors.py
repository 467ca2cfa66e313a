"""Error types raised by addon fields and the cart assembly facade."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validate.report import ValidationReport


class AddonError(ValueError):
    code = "addon_error"


class ValidationError(AddonError):
    code = "invalid"

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


class RequiredFieldMissing(ValidationError):
    code = "required_field_missing"

    def __init__(self, addon_name: str, *, field_name: str | None = None) -> None:
        super().__init__(f'"{addon_name}" is a required field.', field_name=field_name)
        self.addon_name = addon_name


class FileTooLarge(ValidationError):
    code = "file_too_large"

    def __init__(self, *, field_name: str | None = None) -> None:
        super().__init__("Filesize exceeds the limit.", field_name=field_name)


class UploadFailed(AddonError):
    code = "upload_failed"

    def __init__(self, detail: str, *, field_name: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.field_name = field_name


class MalformedInput(ValidationError):
    code = "malformed_input"


class AddonValidationFailed(AddonError):
    code = "validation_failed"

    def __init__(self, report: "ValidationReport") -> None:
        messages = [issue.message for issue in report.issues]
        super().__init__(" ".join(messages) or "Addon validation failed.")
        self.report = report


__all__ = [
    "AddonError",
    "AddonValidationFailed",
    "FileTooLarge",
    "MalformedInput",
    "RequiredFieldMissing",
    "UploadFailed",
    "ValidationError",
]
