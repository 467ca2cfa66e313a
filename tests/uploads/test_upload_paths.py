import hashlib

from addonshift.core.uploads import UploadDir, customer_upload_dir, make_path_rewriter, resolve_upload_dir

CUSTOMER_HASH = hashlib.md5(b"customer-42").hexdigest()


def test_customer_upload_dir_hashes_customer_id() -> None:
    assert customer_upload_dir("customer-42") == f"/product_addons_uploads/{CUSTOMER_HASH}"


def test_empty_subdir_is_appended() -> None:
    resolved = resolve_upload_dir(
        UploadDir(path="/srv/uploads", url="https://shop.test/uploads", basedir="/srv/uploads"),
        "customer-42",
    )

    assert resolved.path == f"/srv/uploads/product_addons_uploads/{CUSTOMER_HASH}"
    assert resolved.url == f"https://shop.test/uploads/product_addons_uploads/{CUSTOMER_HASH}"
    assert resolved.subdir == f"/product_addons_uploads/{CUSTOMER_HASH}"
    assert resolved.basedir == "/srv/uploads"


def test_existing_subdir_is_substituted() -> None:
    resolved = resolve_upload_dir(
        UploadDir(path="/srv/uploads/2026/10", url="https://shop.test/uploads/2026/10", subdir="/2026/10"),
        "customer-42",
    )

    assert resolved.path == f"/srv/uploads/product_addons_uploads/{CUSTOMER_HASH}"
    assert resolved.url == f"https://shop.test/uploads/product_addons_uploads/{CUSTOMER_HASH}"
    assert resolved.subdir == f"/product_addons_uploads/{CUSTOMER_HASH}"


def test_resolving_twice_does_not_double_nest() -> None:
    for upload_dir in (
        UploadDir(path="/srv/uploads", url="https://shop.test/uploads"),
        UploadDir(path="/srv/uploads/2026/10", url="https://shop.test/uploads/2026/10", subdir="/2026/10"),
    ):
        once = resolve_upload_dir(upload_dir, "customer-42")

        assert resolve_upload_dir(once, "customer-42") == once


def test_path_rewriter_binds_customer_id() -> None:
    rewrite = make_path_rewriter("customer-42")
    upload_dir = UploadDir(path="/srv/uploads", url="https://shop.test/uploads")

    assert rewrite(upload_dir) == resolve_upload_dir(upload_dir, "customer-42")
