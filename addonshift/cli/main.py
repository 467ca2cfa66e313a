"""Command-line frontend for the AddonShift core engine."""

from __future__ import annotations

import argparse
import json
import mimetypes
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from addonshift.config import get_settings
from addonshift.core import (
    AddonRequest,
    FileEntry,
    LocalUploader,
    MaxUploadSizePolicy,
    PriceContext,
    addons_from_payload,
    build_cart_item_data,
    config_from_env,
    list_field_types,
    validate_addons,
)
from addonshift.core.errors import AddonError, AddonValidationFailed

load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _read_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _load_addons(path: str) -> list:
    payload = _read_json(path)
    if isinstance(payload, dict):
        payload = payload.get("addons", [payload])
    return addons_from_payload(payload)


def _load_files(items: list[str]) -> dict[str, FileEntry]:
    files: dict[str, FileEntry] = {}
    for item in items:
        key, sep, raw_path = item.partition("=")
        if not sep or not key.strip() or not raw_path.strip():
            raise ValueError(f"--file expects KEY=PATH, got: {item}")
        path = Path(raw_path.strip())
        content = path.read_bytes()
        files[key.strip()] = FileEntry(
            name=path.name,
            size=len(content),
            content=content,
            content_type=mimetypes.guess_type(path.name)[0],
        )
    return files


def _build_request(args: argparse.Namespace) -> AddonRequest:
    values = _read_json(args.values) if args.values else {}
    if not isinstance(values, dict):
        raise ValueError("--values must contain a JSON object keyed by request key.")
    return AddonRequest(values=values, files=_load_files(args.file))


def _size_policy(args: argparse.Namespace) -> MaxUploadSizePolicy:
    if args.max_upload_size is not None:
        return MaxUploadSizePolicy(args.max_upload_size)
    return MaxUploadSizePolicy(config_from_env().max_upload_size)


def _cmd_types(args: argparse.Namespace) -> int:
    _json_dump({"types": list_field_types()})
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    report = validate_addons(
        _load_addons(args.addons),
        _build_request(args),
        size_policy=_size_policy(args),
        strict=args.strict,
    )
    _json_dump(report.to_dict())
    return 0 if report.valid else 1


def _cmd_cart_data(args: argparse.Namespace) -> int:
    price_context = None
    if args.base_amount is not None or args.quantity != 1:
        price_context = PriceContext(base_amount=args.base_amount, quantity=args.quantity)

    uploader = LocalUploader(
        args.upload_dir,
        args.upload_url,
        allowed_extensions=get_settings().allowed_extensions,
    )
    try:
        items = build_cart_item_data(
            _load_addons(args.addons),
            _build_request(args),
            uploader=uploader,
            size_policy=_size_policy(args),
            customer_id=args.customer_id,
            test=args.dry_run,
            price_context=price_context,
            strict=args.strict,
        )
    except AddonValidationFailed as exc:
        _json_dump(exc.report.to_dict())
        return 1

    _json_dump({"items": [item.to_dict() for item in items]})
    return 0


def _add_submission_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--addons", required=True, help="Addon definitions JSON path")
    parser.add_argument("--values", default="", help="Posted values JSON path (object keyed by request key)")
    parser.add_argument("--file", action="append", default=[], help="Uploaded file as KEY=PATH (repeatable)")
    parser.add_argument("--max-upload-size", type=int, default=None, help="Upload size limit in bytes")
    parser.add_argument("--strict", action="store_true")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="addonshift", description="AddonShift core engine CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    types_cmd = subparsers.add_parser("types", help="List registered addon field types")
    types_cmd.set_defaults(func=_cmd_types)

    validate_cmd = subparsers.add_parser("validate", help="Validate posted addon values")
    _add_submission_arguments(validate_cmd)
    validate_cmd.set_defaults(func=_cmd_validate)

    cart_cmd = subparsers.add_parser("cart-data", help="Build priced cart item data from posted addon values")
    _add_submission_arguments(cart_cmd)
    cart_cmd.add_argument("--customer-id", default=None)
    cart_cmd.add_argument("--base-amount", default=None, help="Line item price for percentage based addons")
    cart_cmd.add_argument("--quantity", type=int, default=1)
    cart_cmd.add_argument("--upload-dir", default="uploads")
    cart_cmd.add_argument("--upload-url", default="/uploads")
    cart_cmd.add_argument("--dry-run", action="store_true", help="Skip storing uploaded files")
    cart_cmd.set_defaults(func=_cmd_cart_data)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args) or 0)
    except (AddonError, KeyError, OSError, ValueError) as exc:
        parser.exit(status=2, message=f"error: {exc}\n")


if __name__ == "__main__":
    raise SystemExit(main())
