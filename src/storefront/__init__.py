"""Client-side lesson shop: catalogue browsing, cart and checkout."""

from storefront.cart import Cart
from storefront.checkout import validate_checkout_form
from storefront.client import LessonShopClient
from storefront.errors import CheckoutFailedError, ServiceUnavailableError, StorefrontError
from storefront.models import CartItem, CheckoutForm, Lesson
from storefront.session import CheckoutStage, Page, Storefront, StorefrontState

__all__ = [
    "Cart",
    "CartItem",
    "CheckoutFailedError",
    "CheckoutForm",
    "CheckoutStage",
    "Lesson",
    "LessonShopClient",
    "Page",
    "ServiceUnavailableError",
    "Storefront",
    "StorefrontError",
    "StorefrontState",
    "validate_checkout_form",
]
