"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductCreated:
    """Output: the identifier the store assigned to a new product."""

    product_id: str

    def to_json(self) -> dict[str, str]:
        return {"productId": self.product_id}
