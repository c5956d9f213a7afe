"""
Basket / checkout page.

Usage:
    checkout = CheckoutPage(page)
    checkout.validate_basket_count(4)
    checkout.validate_checkout_currency("GBP")
    checkout.fill_checkout_form(CheckoutDetails())
    checkout.click_on_checkout_btn()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from storefront_qa.pages.base import StorefrontPage

if TYPE_CHECKING:
    from playwright.sync_api import Locator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutDetails:
    """Values typed into the checkout form."""

    first_name: str = "John"
    last_name: str = "Doe"
    email: str = "johndoe@example.com"
    address: str = "123 Example Street"
    city: str = "Bristol"
    zip_code: str = "12345"
    country: str = "United Kingdom"
    card_name: str = "John Doe"
    card_number: str = "4111111111111111"
    card_exp_date: str = "12/24"
    card_cvv: str = "123"


class CheckoutPage(StorefrontPage):
    """Basket summary, shipping choice and the billing form."""

    @property
    def basket_count(self) -> Locator:
        return self.page.locator("#basketCount")

    @property
    def standard_shipping_checkbox(self) -> Locator:
        return self.page.locator("#exampleRadios2")

    @property
    def name_input(self) -> Locator:
        return self.page.locator("#name").first

    @property
    def last_name_input(self) -> Locator:
        return self.page.locator('label[for="lastName"]+input')

    @property
    def email_input(self) -> Locator:
        return self.page.locator("#email")

    @property
    def address_input(self) -> Locator:
        return self.page.locator("#address")

    @property
    def city_select(self) -> Locator:
        return self.page.locator("#city")

    @property
    def zip_input(self) -> Locator:
        return self.page.locator("#zip")

    @property
    def country_select(self) -> Locator:
        return self.page.locator("#country")

    @property
    def card_name_input(self) -> Locator:
        return self.page.locator("#cc-name")

    @property
    def card_number_input(self) -> Locator:
        return self.page.locator("#cc-number")

    @property
    def card_exp_date_input(self) -> Locator:
        return self.page.locator("#cc-expiration")

    @property
    def card_cvv_input(self) -> Locator:
        return self.page.locator("#cc-cvv")

    @property
    def checkout_button(self) -> Locator:
        return self.page.locator('button[type="submit"]').first

    # ── Form ────────────────────────────────────────────────────────

    def fill_name(self, name: str) -> None:
        self.name_input.fill(name)

    def fill_last_name(self, last_name: str) -> None:
        self.last_name_input.fill(last_name)

    def fill_email(self, email: str) -> None:
        self.email_input.fill(email)

    def fill_address(self, address: str) -> None:
        self.address_input.fill(address)

    def select_city(self, city: str) -> None:
        self.city_select.select_option(city)

    def fill_zip(self, zip_code: str) -> None:
        self.zip_input.fill(zip_code)

    def select_country(self, country: str) -> None:
        self.country_select.select_option(country)

    def fill_card_name(self, card_name: str) -> None:
        self.card_name_input.fill(card_name)

    def fill_card_number(self, card_number: str) -> None:
        self.card_number_input.fill(card_number)

    def fill_card_exp_date(self, card_exp_date: str) -> None:
        self.card_exp_date_input.fill(card_exp_date)

    def fill_card_cvv(self, card_cvv: str) -> None:
        self.card_cvv_input.fill(card_cvv)

    def fill_checkout_form(self, details: CheckoutDetails | None = None) -> None:
        """Fill every billing and payment field."""
        details = details or CheckoutDetails()
        logger.debug("Filling checkout form for %s", details.email)
        self.fill_name(details.first_name)
        self.fill_last_name(details.last_name)
        self.fill_email(details.email)
        self.fill_address(details.address)
        self.select_city(details.city)
        self.fill_zip(details.zip_code)
        self.select_country(details.country)
        self.fill_card_name(details.card_name)
        self.fill_card_number(details.card_number)
        self.fill_card_exp_date(details.card_exp_date)
        self.fill_card_cvv(details.card_cvv)

    def click_on_checkout_btn(self) -> None:
        self.checkout_button.click()

    # ── Checks ──────────────────────────────────────────────────────

    def validate_checkout_currency(self, currency: str) -> None:
        label = f"Total ({currency})"
        element = self.contains("span", label)
        self.soft_check_text(element, label, f'Checkout currency should be "{currency}"')
        self.soft_check_visible(element, "Checkout currency visibility should be true")

    def validate_total_price(self, value: str) -> None:
        element = self.contains("strong", value)
        self.soft_check_text(element, value, f'Total price should be "{value}"')
        self.soft_check_visible(element, "Total price visibility should be true")

    def validate_basket_count(self, count: int) -> None:
        self.soft_check_text(self.basket_count, str(count), f'Basket count should be "{count}"')

    def click_on_standard_shipping_and_verify_total_price(self, price: str) -> None:
        self.standard_shipping_checkbox.click(force=True)
        self.validate_total_price(price)
