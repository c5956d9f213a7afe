"""
Basket products and price arithmetic.

Prices are display strings such as ``£1.25``; totals are computed with
``Decimal`` and rendered to two places.
"""

from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, TypeAdapter

CURRENCY_SYMBOL = "£"

_TWO_PLACES = Decimal("0.01")


class Product(BaseModel):
    """A product as listed in the basket."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: str
    quantity: str = "1"

    @property
    def unit_price(self) -> Decimal:
        return Decimal(self.price.replace(CURRENCY_SYMBOL, "").strip())

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * int(self.quantity)


def calculate_total_price(products: list[Product]) -> str:
    """Sum of price times quantity, formatted to two places without a symbol.

    Example:
        >>> calculate_total_price([Product(name="a", price="£1.25", quantity="2")])
        '2.50'
    """
    total = sum((product.line_total for product in products), Decimal("0"))
    return str(total.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def format_price(amount: str | Decimal) -> str:
    """Render an amount as a display price (``£3.70``)."""
    return f"{CURRENCY_SYMBOL}{amount}"


def load_products(path: Path | str) -> list[Product]:
    """Load a JSON list of products."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return TypeAdapter(list[Product]).validate_python(data)
