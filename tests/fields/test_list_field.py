from decimal import Decimal

import pytest

from addonshift.core.canonical import AddonOption
from addonshift.core.errors import MalformedInput, RequiredFieldMissing
from addonshift.core.fields import ListField, selected_labels
from addonshift.core.pricing import PriceContext
from tests.helpers._addon_builders import build_list_addon


@pytest.mark.parametrize("value", [None, "", [], {}])
def test_required_list_field_rejects_empty_values(value) -> None:
    field = ListField(build_list_addon(required=True), value)

    with pytest.raises(RequiredFieldMissing) as excinfo:
        field.validate()

    assert str(excinfo.value) == '"Gift Options" is a required field.'
    assert excinfo.value.field_name == "gift-options"


def test_required_list_field_accepts_any_non_empty_value() -> None:
    ListField(build_list_addon(required=True), ["unknown"]).validate()
    ListField(build_list_addon(required=True), "a").validate()


def test_optional_list_field_passes_without_value() -> None:
    ListField(build_list_addon(), None).validate()


def test_single_matching_option_uses_option_price() -> None:
    records = ListField(build_list_addon(), ["B"]).get_cart_item_data()

    assert len(records) == 1
    assert records[0].value == "B"
    assert records[0].price == 5
    assert records[0].name == "Gift Options"
    assert records[0].field_name == "gift-options"
    assert records[0].field_type == "checkbox"
    assert records[0].price_type == "flat_fee"


def test_slugged_submission_matches_label_case_insensitively() -> None:
    addon = build_list_addon(options=(AddonOption(label="Gift Wrap", price="3.50"),))

    records = ListField(addon, ["GIFT-WRAP"]).get_cart_item_data()

    assert [record.value for record in records] == ["Gift Wrap"]
    assert records[0].display == "Gift Wrap"
    assert records[0].price == Decimal("3.50")


def test_records_follow_option_order_not_submission_order() -> None:
    records = ListField(build_list_addon(), ["b", "a"]).get_cart_item_data()

    assert [record.value for record in records] == ["A", "B"]


def test_unmatched_selections_are_dropped() -> None:
    assert ListField(build_list_addon(), ["zzz"]).get_cart_item_data() == []

    records = ListField(build_list_addon(), ["zzz", "a"]).get_cart_item_data()
    assert [record.value for record in records] == ["A"]


def test_empty_value_yields_no_records() -> None:
    assert ListField(build_list_addon(), "").get_cart_item_data() == []
    assert ListField(build_list_addon(), None).get_cart_item_data() == []


def test_scalar_and_mapping_values_are_normalized() -> None:
    assert [r.value for r in ListField(build_list_addon(), "a").get_cart_item_data()] == ["A"]
    assert [r.value for r in ListField(build_list_addon(), {"0": "b"}).get_cart_item_data()] == ["B"]


def test_nested_selection_keeps_only_first_inner_sequence() -> None:
    addon = build_list_addon(
        options=(
            AddonOption(label="A", price=1),
            AddonOption(label="B", price=2),
            AddonOption(label="C", price=3),
        )
    )

    records = ListField(addon, [["a", "b"], "c"]).get_cart_item_data()

    assert [record.value for record in records] == ["A", "B"]


def test_strict_mode_rejects_nested_selections() -> None:
    field = ListField(build_list_addon(), [["a"], "b"], strict=True)

    with pytest.raises(MalformedInput):
        field.validate()
    with pytest.raises(MalformedInput):
        field.get_cart_item_data()


def test_strict_mode_checks_option_prices_during_validation() -> None:
    addon = build_list_addon(options=(AddonOption(label="A", price="two"),))

    ListField(addon, ["b"], strict=True).validate()
    with pytest.raises(MalformedInput):
        ListField(addon, ["a"], strict=True).validate()


def test_selected_labels_lowercases_and_skips_irregular_items() -> None:
    assert selected_labels(["A", None, ["x"], 3]) == ["a", "3"]


def test_option_price_type_is_resolved_with_price_context() -> None:
    addon = build_list_addon(
        options=(
            AddonOption(label="Rush", price="10", price_type="percentage_based"),
            AddonOption(label="Per Item", price="2", price_type="quantity_based"),
        )
    )

    resolved = ListField(addon, ["rush", "per-item"], price_context=PriceContext(base_amount="40", quantity=3))
    literal = ListField(addon, ["rush", "per-item"])

    assert [r.price for r in resolved.get_cart_item_data()] == [Decimal("4"), Decimal("6")]
    assert [r.price for r in literal.get_cart_item_data()] == [Decimal("10"), Decimal("2")]
    assert [r.price_type for r in literal.get_cart_item_data()] == ["percentage_based", "quantity_based"]


def test_malformed_option_price_becomes_zero() -> None:
    addon = build_list_addon(options=(AddonOption(label="A", price="abc"),))

    records = ListField(addon, ["a"]).get_cart_item_data()

    assert records[0].price == 0


def test_record_name_is_sanitized() -> None:
    addon = build_list_addon(name="<b>Gift</b>   Options")

    records = ListField(addon, ["a"]).get_cart_item_data()

    assert records[0].name == "Gift Options"


def test_request_key_uses_slugged_field_name() -> None:
    field = ListField(build_list_addon(field_name="Gift Options"), None)

    assert field.request_key == "addon-gift-options"
