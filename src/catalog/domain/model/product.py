"""The product creation request.

A NewProduct is transient: it only exists for the duration of one request
and has no identity until the document store assigns one. The type is
structural; nothing at runtime guarantees a request body actually has
this shape.
"""

from __future__ import annotations

from typing import TypedDict

from catalog.domain.model.value_objects import Money, MoneyDict


class NewProduct(TypedDict):
    """Expected shape of the add-product request body."""

    name: str
    price: MoneyDict


def new_product(name: str, price: Money) -> NewProduct:
    """Build a well-formed request body from typed values."""
    return {"name": name, "price": price.to_dict()}
