"""Checkout form validation and order payload construction."""

import re

from storefront.cart import Cart
from storefront.models import CheckoutForm

NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
PHONE_PATTERN = re.compile(r"^\d+$", re.ASCII)


def validate_checkout_form(form: CheckoutForm) -> bool:
    """Name may hold only letters and spaces, phone only digits. Both are required."""
    return bool(NAME_PATTERN.fullmatch(form.name or "")) and bool(PHONE_PATTERN.fullmatch(form.phone or ""))


def build_order(cart: Cart, form: CheckoutForm) -> dict:
    return {
        "name": form.name,
        "phone": form.phone,
        "lessons": cart.lesson_ids(),
    }
