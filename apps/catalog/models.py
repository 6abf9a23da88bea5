from typing import Any, Dict
from pydantic import BaseModel, Field, field_validator


class ProductRecord(BaseModel):
    """Catalog entity as persisted: fixed typed fields plus a bag of dynamic attributes."""

    id: str = Field(default="", description="Assigned on create; immutable afterwards")
    name: str = ""
    description: str = ""
    price: float = 0.0
    # Attribute name -> dynamic value (None, bool, float, str, list, dict)
    attributes: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("attributes", mode="before")
    @classmethod
    def absent_attributes_are_empty(cls, value: Any) -> Any:
        return {} if value is None else value
