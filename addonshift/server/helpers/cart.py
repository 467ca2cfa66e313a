"""Addon validation and cart item data helpers for route handlers."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import HTTPException
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import FormData, UploadFile

from ...config import get_settings
from ...core.api import build_cart_item_data, validate_addons
from ...core.canonical.entities import AddonDefinition, CartItemData, FileEntry
from ...core.canonical.helpers import addons_from_payload
from ...core.errors import AddonValidationFailed, UploadFailed
from ...core.pricing import PriceContext
from ...core.request import AddonRequest
from ...core.uploads import LocalUploader, MaxUploadSizePolicy
from ...core.validate import ValidationReport
from ..logging import cart_items_to_loggable
from ..schemas import AddonSubmission

settings = get_settings()
logger = logging.getLogger("uvicorn.error")


def parse_submission(raw: Any) -> AddonSubmission:
    if not isinstance(raw, str) or not raw.strip():
        raise HTTPException(status_code=400, detail="payload is required")
    try:
        return AddonSubmission.model_validate(json.loads(raw))
    except (json.JSONDecodeError, PydanticValidationError) as exc:
        raise HTTPException(status_code=422, detail=f"Invalid payload: {exc}") from exc


def resolve_addons(submission: AddonSubmission) -> list[AddonDefinition]:
    try:
        return addons_from_payload(submission.addons)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


async def read_file_entries(form: FormData) -> dict[str, FileEntry]:
    files: dict[str, FileEntry] = {}
    for key, item in form.multi_items():
        if not isinstance(item, UploadFile):
            continue
        content = await item.read()
        files[key] = FileEntry(
            name=item.filename or "",
            size=len(content),
            content=content,
            content_type=item.content_type,
        )
    return files


def _price_context(submission: AddonSubmission) -> PriceContext | None:
    if not submission.has_price_context:
        return None
    return PriceContext(base_amount=submission.base_amount, quantity=submission.quantity)


def _size_policy() -> MaxUploadSizePolicy:
    return MaxUploadSizePolicy(settings.max_upload_size)


def _uploader() -> LocalUploader:
    return LocalUploader(
        settings.upload_dir,
        settings.upload_url,
        allowed_extensions=settings.allowed_extensions,
    )


def _report_status(report: ValidationReport) -> int:
    if any(issue.code == "file_too_large" for issue in report.issues):
        return 413
    return 422


def run_validate(submission: AddonSubmission, files: dict[str, FileEntry]) -> ValidationReport:
    addons = resolve_addons(submission)
    try:
        return validate_addons(
            addons,
            AddonRequest(values=submission.values, files=files),
            size_policy=_size_policy(),
            strict=submission.strict,
        )
    except KeyError as exc:
        raise HTTPException(status_code=422, detail=str(exc).strip("'\"")) from exc


def run_build_cart_item_data(submission: AddonSubmission, files: dict[str, FileEntry]) -> list[CartItemData]:
    addons = resolve_addons(submission)
    try:
        items = build_cart_item_data(
            addons,
            AddonRequest(values=submission.values, files=files),
            uploader=_uploader(),
            size_policy=_size_policy(),
            customer_id=submission.customer_id,
            test=submission.test,
            price_context=_price_context(submission),
            strict=submission.strict,
        )
    except AddonValidationFailed as exc:
        raise HTTPException(status_code=_report_status(exc.report), detail=exc.report.to_dict()) from exc
    except UploadFailed as exc:
        raise HTTPException(status_code=502, detail=f"Upload failed: {exc.detail}") from exc
    except KeyError as exc:
        raise HTTPException(status_code=422, detail=str(exc).strip("'\"")) from exc

    logger.debug(
        "Cart item data summary:\n%s",
        json.dumps(cart_items_to_loggable(items), ensure_ascii=False, indent=2),
    )
    return items
