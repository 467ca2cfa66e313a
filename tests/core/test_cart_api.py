import pytest

from addonshift.core import AddonRequest, build_cart_item_data, validate_addons
from addonshift.core.canonical import AddonOption
from addonshift.core.errors import AddonValidationFailed, UploadFailed
from addonshift.core.uploads import MaxUploadSizePolicy
from tests.helpers._addon_builders import FakeUploader, build_file_entry, build_list_addon, build_upload_addon


def test_required_upload_end_to_end() -> None:
    addon = build_upload_addon()

    report = validate_addons([addon], AddonRequest())
    assert report.valid is False
    assert report.issues[0].code == "required_field_missing"
    assert report.issues[0].message == '"Engraving" is a required field.'
    assert report.issues[0].field == "engraving"

    request = AddonRequest(files={"addon-engraving": build_file_entry()})
    assert validate_addons([addon], request).valid is True

    records = build_cart_item_data([addon], request, uploader=FakeUploader(), customer_id="c-1")
    assert len(records) == 1
    assert records[0].price == 5
    assert records[0].display == "engraving.png"


def test_validate_addons_collects_every_failing_field() -> None:
    addons = [
        build_list_addon(required=True),
        build_upload_addon(name="Artwork", field_name="artwork", required=False),
        build_upload_addon(),
    ]
    request = AddonRequest(files={"addon-artwork": build_file_entry(content=b"x" * 50)})

    report = validate_addons(addons, request, size_policy=MaxUploadSizePolicy(10))

    assert report.valid is False
    assert [(issue.code, issue.field) for issue in report.issues] == [
        ("required_field_missing", "gift-options"),
        ("file_too_large", "artwork"),
        ("required_field_missing", "engraving"),
    ]
    assert report.to_dict()["issues"][1]["message"] == "Filesize exceeds the limit."


def test_validate_addons_never_uploads() -> None:
    request = AddonRequest(files={"addon-engraving": build_file_entry()})

    assert validate_addons([build_upload_addon()], request).valid is True


def test_build_cart_item_data_refuses_invalid_submissions_before_uploading() -> None:
    uploader = FakeUploader()
    addons = [build_upload_addon(field_name="artwork", required=False), build_list_addon(required=True)]
    request = AddonRequest(files={"addon-artwork": build_file_entry()})

    with pytest.raises(AddonValidationFailed) as excinfo:
        build_cart_item_data(addons, request, uploader=uploader)

    assert excinfo.value.report.issues[0].field == "gift-options"
    assert uploader.calls == []


def test_build_cart_item_data_concatenates_records_in_addon_order() -> None:
    addons = [
        build_list_addon(
            name="Wrapping",
            field_name="wrapping",
            options=(AddonOption(label="Gift Wrap", price="3"), AddonOption(label="Ribbon", price="1")),
        ),
        build_upload_addon(required=False),
        build_list_addon(),
    ]
    request = AddonRequest(
        values={
            "addon-wrapping": ["ribbon", "gift-wrap"],
            "addon-engraving": "https://shop.test/uploads/previous.png",
            "gift-options": "b",
        }
    )

    records = build_cart_item_data(addons, request)

    assert [(record.field_name, record.value) for record in records] == [
        ("wrapping", "Gift Wrap"),
        ("wrapping", "Ribbon"),
        ("engraving", "https://shop.test/uploads/previous.png"),
        ("gift-options", "B"),
    ]


def test_build_cart_item_data_propagates_upload_failures() -> None:
    request = AddonRequest(files={"addon-engraving": build_file_entry()})

    with pytest.raises(UploadFailed, match="Disk full"):
        build_cart_item_data([build_upload_addon()], request, uploader=FakeUploader(error="Disk full"))


def test_unknown_addon_types_are_rejected() -> None:
    with pytest.raises(KeyError):
        validate_addons([build_list_addon(type="heading")], AddonRequest())


def test_default_size_policy_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("ADDONS_MAX_UPLOAD_SIZE", "3")
    request = AddonRequest(files={"addon-engraving": build_file_entry(content=b"1234")})

    report = validate_addons([build_upload_addon()], request)

    assert [issue.code for issue in report.issues] == ["file_too_large"]


def test_strict_nested_selection_is_reported_before_any_upload() -> None:
    uploader = FakeUploader()
    addons = [build_upload_addon(), build_list_addon()]
    request = AddonRequest(
        values={"addon-gift-options": [["a"], "b"]},
        files={"addon-engraving": build_file_entry()},
    )

    report = validate_addons(addons, request, strict=True)
    assert [(issue.code, issue.field) for issue in report.issues] == [("malformed_input", "gift-options")]

    with pytest.raises(AddonValidationFailed) as excinfo:
        build_cart_item_data(addons, request, uploader=uploader, strict=True)

    assert excinfo.value.report.issues[0].code == "malformed_input"
    assert uploader.calls == []


def test_strict_malformed_addon_price_is_a_validation_issue() -> None:
    uploader = FakeUploader()
    request = AddonRequest(files={"addon-engraving": build_file_entry()})

    with pytest.raises(AddonValidationFailed) as excinfo:
        build_cart_item_data([build_upload_addon(price="five")], request, uploader=uploader, strict=True)

    assert excinfo.value.report.issues[0].field == "engraving"
    assert uploader.calls == []
