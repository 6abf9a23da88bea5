"""
Attribute value codec: wire AttributeValue <-> dynamic (document) values.

Dynamic values are the Python natives a document store round-trips:
None, bool, float, str, list and dict with str keys. Ints read back from the
store are accepted while they fit a double exactly.
"""

import math
from typing import Any, Dict, Iterable, Mapping, Set

from framework.exceptions.errors import UnsupportedValueKind
from .models import ProductRecord
from .schemas import (
    AttributeValue,
    BoolValue,
    ListProductsResponse,
    ListValue,
    NullValue,
    NumberValue,
    ProductSchema,
    StringValue,
    StructValue,
)

# Largest magnitude at which every integer is exactly representable as a double
MAX_EXACT_INT = 2 ** 53


def to_dynamic(value: AttributeValue) -> Any:
    """Convert a wire value to its dynamic form. Total over AttributeValue."""
    if isinstance(value, NullValue):
        return None
    if isinstance(value, BoolValue):
        return value.value
    if isinstance(value, NumberValue):
        return float(value.value)
    if isinstance(value, StringValue):
        return value.value
    if isinstance(value, ListValue):
        return [to_dynamic(item) for item in value.values]
    if isinstance(value, StructValue):
        return {key: to_dynamic(item) for key, item in value.fields.items()}
    raise TypeError(f"not a wire attribute value: {type(value).__name__}")


def from_dynamic(value: Any, path: str = "") -> AttributeValue:
    """Convert a dynamic value to its wire form.

    Raises UnsupportedValueKind naming ``path`` (extended with list indexes
    and struct keys) for the first value that has no wire variant.
    """
    return _from_dynamic(value, path, set())


def _from_dynamic(value: Any, path: str, active: Set[int]) -> AttributeValue:
    if value is None:
        return NullValue()
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BoolValue(value=value)
    if isinstance(value, int):
        if abs(value) > MAX_EXACT_INT:
            raise UnsupportedValueKind(path, type(value).__name__, "integer exceeds double precision")
        return NumberValue(value=float(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedValueKind(path, type(value).__name__, "non-finite number")
        return NumberValue(value=value)
    if isinstance(value, str):
        return StringValue(value=value)
    if isinstance(value, (list, tuple)):
        _enter(value, path, active)
        try:
            items = [
                _from_dynamic(item, f"{path}[{index}]", active)
                for index, item in enumerate(value)
            ]
        finally:
            active.discard(id(value))
        return ListValue(values=items)
    if isinstance(value, Mapping):
        _enter(value, path, active)
        try:
            fields = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise UnsupportedValueKind(path, type(key).__name__, "non-string map key")
                fields[key] = _from_dynamic(item, f"{path}.{key}" if path else key, active)
        finally:
            active.discard(id(value))
        return StructValue(fields=fields)
    raise UnsupportedValueKind(path, type(value).__name__)


def _enter(container: Any, path: str, active: Set[int]) -> None:
    if id(container) in active:
        raise UnsupportedValueKind(path, type(container).__name__, "cyclic structure")
    active.add(id(container))


def attributes_to_dynamic(attributes: Mapping[str, AttributeValue]) -> Dict[str, Any]:
    """Convert a wire attribute bag; an empty bag yields an empty dict."""
    return {name: to_dynamic(value) for name, value in attributes.items()}


def attributes_from_dynamic(attributes: Mapping[str, Any]) -> Dict[str, AttributeValue]:
    """Convert a dynamic attribute bag, failing on the first bad attribute.

    The result is only returned once every attribute converted.
    """
    converted: Dict[str, AttributeValue] = {}
    for name, value in attributes.items():
        converted[name] = from_dynamic(value, name)
    return converted


def ensure_representable(attributes: Mapping[str, Any]) -> None:
    """Raise UnsupportedValueKind if any attribute could not be read back as a wire value."""
    attributes_from_dynamic(attributes)


def product_to_record(product: ProductSchema) -> ProductRecord:
    return ProductRecord(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        attributes=attributes_to_dynamic(product.attributes),
    )


def record_to_product(record: ProductRecord) -> ProductSchema:
    return ProductSchema(
        id=record.id,
        name=record.name,
        description=record.description,
        price=record.price,
        attributes=attributes_from_dynamic(record.attributes),
    )


def records_to_list_response(records: Iterable[ProductRecord]) -> ListProductsResponse:
    """Convert records in order; the first unconvertible record fails the whole response."""
    return ListProductsResponse(products=[record_to_product(record) for record in records])
