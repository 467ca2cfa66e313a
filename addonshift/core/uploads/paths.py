"""Customer-scoped upload directory resolution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
import hashlib

UPLOADS_SEGMENT = "product_addons_uploads"


@dataclass(frozen=True)
class UploadDir:
    path: str
    url: str
    subdir: str = ""
    basedir: str = ""
    baseurl: str = ""


PathRewriter = Callable[[UploadDir], UploadDir]


def hash_customer_id(customer_id: str) -> str:
    return hashlib.md5(str(customer_id).encode("utf-8")).hexdigest()


def customer_upload_dir(customer_id: str) -> str:
    return f"/{UPLOADS_SEGMENT}/{hash_customer_id(customer_id)}"


def resolve_upload_dir(upload_dir: UploadDir, customer_id: str) -> UploadDir:
    """Nest ``upload_dir`` under the customer's upload folder.

    An existing subdir is substituted rather than appended to, so resolving an
    already-resolved directory returns it unchanged.
    """
    subdir = customer_upload_dir(customer_id)
    if not upload_dir.subdir:
        return replace(
            upload_dir,
            path=f"{upload_dir.path}{subdir}",
            url=f"{upload_dir.url}{subdir}",
            subdir=subdir,
        )

    current = upload_dir.subdir
    return replace(
        upload_dir,
        path=upload_dir.path.replace(current, subdir),
        url=upload_dir.url.replace(current, subdir),
        subdir=subdir,
    )


def make_path_rewriter(customer_id: str) -> PathRewriter:
    def _rewrite(upload_dir: UploadDir) -> UploadDir:
        return resolve_upload_dir(upload_dir, customer_id)

    return _rewrite


__all__ = [
    "UPLOADS_SEGMENT",
    "PathRewriter",
    "UploadDir",
    "customer_upload_dir",
    "hash_customer_id",
    "make_path_rewriter",
    "resolve_upload_dir",
]
