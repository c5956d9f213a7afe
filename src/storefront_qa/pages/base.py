"""
Base page object for the Sweet Shop storefront.

Page objects wrap a Playwright sync ``Page``. Validation methods never
raise on mismatch; they record soft failures on the injected aggregator
(or the default one wired by the pytest plugin).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront_qa.soft_assert import get_soft_assertions

if TYPE_CHECKING:
    from playwright.sync_api import Locator, Page

    from storefront_qa.soft_assert import SoftAssertions

logger = logging.getLogger(__name__)


class StorefrontPage:
    """Elements and checks shared by every storefront page."""

    def __init__(self, page: Page, soft: SoftAssertions | None = None) -> None:
        self.page = page
        self._soft = soft

    @property
    def soft(self) -> SoftAssertions:
        return self._soft or get_soft_assertions()

    # ── Elements ────────────────────────────────────────────────────

    @property
    def navbar_toggler(self) -> Locator:
        return self.page.locator(".navbar-toggler")

    @property
    def basket_link(self) -> Locator:
        return self.page.locator('a[href="/basket"]')

    def contains(self, selector: str, text: str) -> Locator:
        """First ``selector`` element whose text contains ``text``."""
        return self.page.locator(selector, has_text=text).first

    # ── Actions ─────────────────────────────────────────────────────

    def open_navbar(self) -> None:
        self.navbar_toggler.click()

    def click_on_basket(self) -> None:
        logger.debug("Opening basket")
        self.basket_link.click()

    # ── Checks ──────────────────────────────────────────────────────

    def soft_check_text(self, locator: Locator, expected: str, message: str) -> None:
        """Soft-check an element's text content."""
        self.soft.check((locator.text_content() or "").strip(), expected, message)

    def soft_check_visible(self, locator: Locator, message: str) -> None:
        self.soft.check(locator.is_visible(), True, message)

    def validate_product_title_price_and_quantity(
        self, index: int, title: str, price: str, quantity: str
    ) -> None:
        """Soft-check the text and visibility of one basket line."""
        logger.debug("Validating basket line %d: %s %s x %s", index, title, price, quantity)

        title_el = self.contains("h6", title)
        self.soft_check_text(title_el, title, f'Product title should be "{title}"')
        self.soft_check_visible(title_el, "Product visibility should be true")

        price_el = self.contains("span", price)
        self.soft_check_text(price_el, price, f'Product price should be "{price}"')
        self.soft_check_visible(price_el, "Product price visibility should be true")

        quantity_text = f"x {quantity}"
        quantity_el = self.contains("small", quantity_text)
        self.soft_check_text(
            quantity_el, quantity_text, f'Product quantity should be "{quantity_text}"'
        )
        self.soft_check_visible(quantity_el, "Product quantity visibility should be true")
