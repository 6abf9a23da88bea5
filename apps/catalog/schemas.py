"""
Wire schemas for the catalog API.

Attribute values travel as a tagged union discriminated by ``kind``:

    {"kind": "null"}
    {"kind": "bool", "value": true}
    {"kind": "number", "value": 12}
    {"kind": "string", "value": "blue"}
    {"kind": "list", "values": [...]}
    {"kind": "struct", "fields": {"unit": {...}}}
"""

import math
from typing import Annotated, Dict, List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator


class _WireValue(BaseModel):
    model_config = ConfigDict(extra="forbid")


class NullValue(_WireValue):
    kind: Literal["null"] = "null"


class BoolValue(_WireValue):
    kind: Literal["bool"] = "bool"
    value: StrictBool


class NumberValue(_WireValue):
    """Double-precision number; ints are accepted and widened."""
    kind: Literal["number"] = "number"
    value: Union[StrictFloat, StrictInt]

    @field_validator("value")
    @classmethod
    def finite_double(cls, value):
        try:
            value = float(value)
        except OverflowError:
            raise ValueError("number must be finite")
        if not math.isfinite(value):
            raise ValueError("number must be finite")
        return value


class StringValue(_WireValue):
    kind: Literal["string"] = "string"
    value: StrictStr


class ListValue(_WireValue):
    kind: Literal["list"] = "list"
    values: List["AttributeValue"] = Field(default_factory=list)


class StructValue(_WireValue):
    kind: Literal["struct"] = "struct"
    fields: Dict[str, "AttributeValue"] = Field(default_factory=dict)


AttributeValue = Annotated[
    Union[NullValue, BoolValue, NumberValue, StringValue, ListValue, StructValue],
    Field(discriminator="kind"),
]

ListValue.model_rebuild()
StructValue.model_rebuild()


class ProductSchema(BaseModel):
    """Product as sent and received by clients."""
    id: str = Field(default="", description="Ignored on create; taken from the path on update")
    name: str = ""
    description: str = ""
    price: float = 0.0
    attributes: Dict[str, AttributeValue] = Field(default_factory=dict)


class DeleteProductResponse(BaseModel):
    result: str = "success"


class ListProductsResponse(BaseModel):
    products: List[ProductSchema] = Field(default_factory=list)
