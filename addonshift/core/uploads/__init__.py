from .local import LocalUploader, UploadResult, Uploader
from .paths import (
    PathRewriter,
    UploadDir,
    customer_upload_dir,
    hash_customer_id,
    make_path_rewriter,
    resolve_upload_dir,
)
from .policy import MaxUploadSizePolicy, SizePolicy

__all__ = [
    "LocalUploader",
    "MaxUploadSizePolicy",
    "PathRewriter",
    "SizePolicy",
    "UploadDir",
    "UploadResult",
    "Uploader",
    "customer_upload_dir",
    "hash_customer_id",
    "make_path_rewriter",
    "resolve_upload_dir",
]
