"""JSON API routes: /health, /api/v1/addons/*."""


from fastapi import APIRouter, Request

from ...config import get_settings
from ...core.registry import list_field_types
from ..helpers import parse_submission, read_file_entries, run_build_cart_item_data, run_validate

settings = get_settings()
router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok", "app": settings.app_name}


@router.get("/api/v1/addons/types")
def addon_types() -> dict:
    return {"types": list_field_types()}


@router.post("/api/v1/addons/validate")
async def validate_addons_api(request: Request) -> dict:
    form = await request.form()
    submission = parse_submission(form.get("payload"))
    files = await read_file_entries(form)
    report = run_validate(submission, files)
    return report.to_dict()


@router.post("/api/v1/addons/cart-item-data")
async def cart_item_data_api(request: Request) -> dict:
    form = await request.form()
    submission = parse_submission(form.get("payload"))
    files = await read_file_entries(form)
    items = run_build_cart_item_data(submission, files)
    return {"items": [item.to_dict() for item in items]}
