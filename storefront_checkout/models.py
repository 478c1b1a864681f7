"""
Input models for cart line operations.

A line value is either a bare quantity or a detailed line with attributes.
``LineItemInput.coerce`` is the single place that tells the two apart.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, Field

from storefront_checkout.utils.attribute_formatter import AttributeFormatter


class Attribute(BaseModel):
    key: str
    value: Any


class LineItemInput(BaseModel):
    quantity: int = 0
    attributes: list[Attribute] = Field(default_factory=list)

    @classmethod
    def coerce(cls, value: "LineValue") -> "LineItemInput":
        if isinstance(value, LineItemInput):
            return value
        if isinstance(value, Mapping):
            return cls(
                quantity=value.get("quantity") or 0,
                attributes=AttributeFormatter.format(value.get("attributes") or {}),
            )
        return cls(quantity=int(value))

    def attributes_payload(self) -> list[dict[str, str]]:
        return [attribute.model_dump() for attribute in self.attributes]


# Quantity | {quantity, attributes}
LineValue = Union[int, LineItemInput, Mapping[str, Any]]


class CartLineInput(BaseModel):
    merchandiseId: str
    quantity: int
    attributes: list[Attribute] = Field(default_factory=list)
    sellingPlanId: Optional[str] = None

    def to_variables(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class CartLineUpdateInput(BaseModel):
    id: str
    quantity: int
    attributes: list[Attribute] = Field(default_factory=list)

    def to_variables(self) -> dict[str, Any]:
        return self.model_dump()
