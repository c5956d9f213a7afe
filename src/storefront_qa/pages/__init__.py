"""
Page objects for the Sweet Shop storefront (Playwright sync API).

Usage:
    from storefront_qa.pages import CheckoutPage, SweetshopPage

    def test_basket(page, products):
        shop = SweetshopPage(page)
        shop.launch_application()
        shop.add_to_basket(1)
        shop.click_on_basket()
        CheckoutPage(page).validate_basket_count(1)
"""

from __future__ import annotations

from storefront_qa.pages.base import StorefrontPage
from storefront_qa.pages.checkout import CheckoutDetails, CheckoutPage
from storefront_qa.pages.products import (
    Product,
    calculate_total_price,
    format_price,
    load_products,
)
from storefront_qa.pages.sweetshop import SweetshopPage

__all__ = [
    "CheckoutDetails",
    "CheckoutPage",
    "Product",
    "StorefrontPage",
    "SweetshopPage",
    "calculate_total_price",
    "format_price",
    "load_products",
]
