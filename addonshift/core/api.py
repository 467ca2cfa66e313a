"""Stable public API facade for validating addons and building cart data."""


import logging
from typing import Iterable

from .canonical.entities import AddonDefinition, CartItemData
from .config import config_from_env
from .errors import AddonValidationFailed, ValidationError
from .fields.base import Field
from .pricing import PriceContext
from .registry import FieldContext, create_field
from .request import AddonRequest
from .uploads.local import Uploader
from .uploads.policy import MaxUploadSizePolicy, SizePolicy
from .validate import ValidationIssue, ValidationReport

logger = logging.getLogger(__name__)


def _build_fields(
    addons: Iterable[AddonDefinition],
    request: AddonRequest,
    *,
    uploader: Uploader | None,
    size_policy: SizePolicy | None,
    customer_id: str | None,
    test: bool,
    price_context: PriceContext | None,
    strict: bool,
) -> list[Field]:
    if size_policy is None:
        size_policy = MaxUploadSizePolicy(config_from_env().max_upload_size)

    fields: list[Field] = []
    for addon in addons:
        context = FieldContext(
            file_entry=request.file_for(addon),
            uploader=uploader,
            size_policy=size_policy,
            customer_id=customer_id,
            test=test,
            price_context=price_context,
            strict=strict,
        )
        fields.append(create_field(addon, request.value_for(addon), context))
    return fields


def _collect_issues(fields: list[Field]) -> ValidationReport:
    issues: list[ValidationIssue] = []
    for addon_field in fields:
        try:
            addon_field.validate()
        except ValidationError as exc:
            issues.append(
                ValidationIssue(
                    code=exc.code,
                    message=str(exc),
                    field=addon_field.addon.field_name,
                )
            )
    return ValidationReport(valid=not issues, issues=issues)


def validate_addons(
    addons: Iterable[AddonDefinition],
    request: AddonRequest,
    *,
    size_policy: SizePolicy | None = None,
    strict: bool = False,
) -> ValidationReport:
    fields = _build_fields(
        addons,
        request,
        uploader=None,
        size_policy=size_policy,
        customer_id=None,
        test=True,
        price_context=None,
        strict=strict,
    )
    return _collect_issues(fields)


def build_cart_item_data(
    addons: Iterable[AddonDefinition],
    request: AddonRequest,
    *,
    uploader: Uploader | None = None,
    size_policy: SizePolicy | None = None,
    customer_id: str | None = None,
    test: bool = False,
    price_context: PriceContext | None = None,
    strict: bool = False,
) -> list[CartItemData]:
    """Validate every addon, then derive cart item data in addon order.

    Raises :class:`AddonValidationFailed` with the full report when any field
    is invalid; nothing is uploaded in that case.
    """
    fields = _build_fields(
        addons,
        request,
        uploader=uploader,
        size_policy=size_policy,
        customer_id=customer_id,
        test=test,
        price_context=price_context,
        strict=strict,
    )
    report = _collect_issues(fields)
    if not report.valid:
        raise AddonValidationFailed(report)

    cart_item_data: list[CartItemData] = []
    for addon_field in fields:
        cart_item_data.extend(addon_field.get_cart_item_data())
    logger.debug("Built %d cart item data record(s) from %d addon(s).", len(cart_item_data), len(fields))
    return cart_item_data


__all__ = ["build_cart_item_data", "validate_addons"]
