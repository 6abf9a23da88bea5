"""Attribute value codec test cases."""
from datetime import datetime
from decimal import Decimal

import pytest

from apps.catalog.codec import (
    MAX_EXACT_INT,
    attributes_from_dynamic,
    attributes_to_dynamic,
    from_dynamic,
    product_to_record,
    record_to_product,
    records_to_list_response,
    to_dynamic,
)
from apps.catalog.models import ProductRecord
from apps.catalog.schemas import (
    BoolValue,
    ListValue,
    NullValue,
    NumberValue,
    ProductSchema,
    StringValue,
    StructValue,
)
from framework.exceptions.errors import UnsupportedValueKind


class TestToDynamic:
    """Wire -> dynamic."""

    def test_scalars(self):
        assert to_dynamic(NullValue()) is None
        assert to_dynamic(BoolValue(value=False)) is False
        assert to_dynamic(NumberValue(value=12)) == 12.0
        assert isinstance(to_dynamic(NumberValue(value=12)), float)
        assert to_dynamic(StringValue(value="blue")) == "blue"

    def test_nested(self):
        value = StructValue(fields={
            "dims": ListValue(values=[NumberValue(value=1.5), NullValue()]),
            "meta": StructValue(fields={"ok": BoolValue(value=True)}),
        })

        assert to_dynamic(value) == {"dims": [1.5, None], "meta": {"ok": True}}

    def test_empty_bag_is_empty_dict(self):
        assert attributes_to_dynamic({}) == {}

    def test_rejects_foreign_object(self):
        with pytest.raises(TypeError):
            to_dynamic("blue")


class TestFromDynamic:
    """Dynamic -> wire."""

    def test_scalars(self):
        assert from_dynamic(None) == NullValue()
        assert from_dynamic(True) == BoolValue(value=True)
        assert from_dynamic(9.99) == NumberValue(value=9.99)
        assert from_dynamic("blue") == StringValue(value="blue")

    def test_bool_is_not_a_number(self):
        assert isinstance(from_dynamic(False), BoolValue)

    def test_int_widens_to_number(self):
        value = from_dynamic(12)

        assert isinstance(value, NumberValue)
        assert value.value == 12.0

    def test_tuple_is_a_list(self):
        assert from_dynamic(("a", 1.0)) == ListValue(values=[StringValue(value="a"), NumberValue(value=1.0)])

    def test_shared_reference_is_not_a_cycle(self):
        shared = [1.0]

        value = from_dynamic({"a": shared, "b": shared})

        assert to_dynamic(value) == {"a": [1.0], "b": [1.0]}

    @pytest.mark.parametrize(
        "value, kind",
        [
            (datetime(2024, 1, 1), "datetime"),
            (Decimal("1.10"), "Decimal"),
            (b"raw", "bytes"),
            ({1, 2}, "set"),
            (float("nan"), "float"),
            (float("inf"), "float"),
            (MAX_EXACT_INT + 1, "int"),
        ],
    )
    def test_unsupported_kinds(self, value, kind):
        with pytest.raises(UnsupportedValueKind) as exc_info:
            from_dynamic(value, "attr")

        assert exc_info.value.path == "attr"
        assert exc_info.value.kind == kind

    def test_largest_exact_int_is_accepted(self):
        assert from_dynamic(-MAX_EXACT_INT).value == float(-MAX_EXACT_INT)

    def test_error_path_points_into_nested_value(self):
        value = {"dims": [1.0, {"unit": datetime(2024, 1, 1)}]}

        with pytest.raises(UnsupportedValueKind) as exc_info:
            from_dynamic(value, "package")

        assert exc_info.value.path == "package.dims[1].unit"
        assert 'parsing attribute "package.dims[1].unit"' in str(exc_info.value)

    def test_non_string_key(self):
        with pytest.raises(UnsupportedValueKind) as exc_info:
            from_dynamic({1: "one"}, "lookup")

        assert exc_info.value.path == "lookup"
        assert exc_info.value.reason == "non-string map key"

    def test_cyclic_structure(self):
        looped = {"name": "loop"}
        looped["self"] = looped

        with pytest.raises(UnsupportedValueKind) as exc_info:
            from_dynamic(looped, "loop")

        assert exc_info.value.path == "loop.self"
        assert exc_info.value.reason == "cyclic structure"


class TestRoundTrip:
    """Values survive both directions."""

    def test_wire_to_dynamic_to_wire(self):
        wire = {
            "color": StringValue(value="blue"),
            "size": NumberValue(value=12),
            "tags": ListValue(values=[StringValue(value="a"), BoolValue(value=True), NullValue()]),
            "dims": StructValue(fields={"w": NumberValue(value=1.5), "h": ListValue()}),
        }

        assert attributes_from_dynamic(attributes_to_dynamic(wire)) == wire

    def test_dynamic_to_wire_to_dynamic(self):
        dynamic = {"color": "blue", "size": 12.0, "nested": {"list": [None, False, "x", {"deep": []}]}}

        assert attributes_to_dynamic(attributes_from_dynamic(dynamic)) == dynamic


class TestAttributeBag:
    """Whole-bag conversion."""

    def test_failure_names_attribute_and_returns_nothing(self):
        attributes = {"color": "blue", "released": datetime(2024, 1, 1), "size": 12.0}
        result = None

        with pytest.raises(UnsupportedValueKind) as exc_info:
            result = attributes_from_dynamic(attributes)

        assert exc_info.value.path == "released"
        assert result is None
        assert attributes == {"color": "blue", "released": datetime(2024, 1, 1), "size": 12.0}

    def test_empty_bag(self):
        assert attributes_from_dynamic({}) == {}


class TestProductMapping:
    """Product-level mappers."""

    def test_product_to_record(self):
        product = ProductSchema(
            id="1",
            name="Product1",
            description="Product Description",
            price=10.0,
            attributes={"Color": StringValue(value="Blue")},
        )

        record = product_to_record(product)

        assert record == ProductRecord(
            id="1",
            name="Product1",
            description="Product Description",
            price=10.0,
            attributes={"Color": "Blue"},
        )

    def test_record_to_product(self):
        record = ProductRecord(id="uuid", name="name", description="description", price=1, attributes={"color": "blue", "size": 12.0})

        product = record_to_product(record)

        assert product == ProductSchema(
            id="uuid",
            name="name",
            description="description",
            price=1,
            attributes={"color": StringValue(value="blue"), "size": NumberValue(value=12.0)},
        )

    def test_record_to_product_error(self):
        record = ProductRecord(id="uuid", attributes={"when": datetime(2024, 1, 1)})

        with pytest.raises(UnsupportedValueKind, match='parsing attribute "when"'):
            record_to_product(record)

    def test_list_response_fails_on_first_bad_record(self):
        records = [
            ProductRecord(id="id", attributes={"color": "blue"}),
            ProductRecord(id="id2", attributes={"bad": object()}),
        ]

        with pytest.raises(UnsupportedValueKind) as exc_info:
            records_to_list_response(records)

        assert exc_info.value.path == "bad"

    def test_list_response(self):
        records = [ProductRecord(id="id", name="name"), ProductRecord(id="id2", name="name2")]

        response = records_to_list_response(records)

        assert [product.id for product in response.products] == ["id", "id2"]
        assert response.products[0].attributes == {}
