"""Sweet Shop landing page."""

from __future__ import annotations

import logging

from storefront_qa.pages.base import StorefrontPage

logger = logging.getLogger(__name__)

# Time for the basket counter to update after a click
ADD_TO_BASKET_SETTLE_MS = 500


class SweetshopPage(StorefrontPage):
    """Product listing with add-to-basket buttons."""

    def launch_application(self) -> None:
        """Open the storefront root (relative to the context's base URL)."""
        self.page.goto("/")

    def add_to_basket(self, index: int = 0) -> None:
        """Click the add-to-basket button of product ``data-id=index``."""
        logger.debug("Adding product %d to basket", index)
        self.page.locator(f'[data-id="{index}"]').click()
        self.page.wait_for_timeout(ADD_TO_BASKET_SETTLE_MS)
