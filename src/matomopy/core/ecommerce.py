"""Ecommerce line items sent as ``ec_items``."""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class EcommerceItem:
    """A single ecommerce line item.

    All fields are optional. Missing text fields are encoded as ``""``, a
    missing price as ``0.0`` and a missing quantity as ``0``.
    """

    sku: str | None = None
    name: str | None = None
    category: str | None = None
    price: float | None = None
    quantity: int | None = None

    def to_list(self) -> list[str | float | int]:
        return [
            self.sku or "",
            self.name or "",
            self.category or "",
            float(self.price) if self.price is not None else 0.0,
            int(self.quantity) if self.quantity is not None else 0,
        ]


class EcommerceItems:
    """Ordered list of ecommerce items."""

    def __init__(self, items: Iterable[EcommerceItem] | None = None) -> None:
        self._items: list[EcommerceItem] = list(items or [])

    def add(self, item: EcommerceItem) -> "EcommerceItems":
        self._items.append(item)
        return self

    def clear(self) -> None:
        self._items.clear()

    def __getitem__(self, index: int) -> EcommerceItem:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[EcommerceItem]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EcommerceItems):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"EcommerceItems({self.to_json()})"

    def to_json(self) -> str:
        """Encode as ``[["sku","name","category",price,quantity],...]``."""
        return json.dumps(
            [item.to_list() for item in self._items],
            separators=(",", ":"),
            ensure_ascii=False,
        )

    __str__ = to_json
