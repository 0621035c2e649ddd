"""Storefront controller — catalogue browsing, cart building and checkout.

Holds the client-side application state and drives the checkout lifecycle:

    browsing -> cart-building -> checkout-pending -> browsing | failed

A completed checkout returns straight to browsing with the new order id in
``last_order_id``. A failed checkout keeps the cart and form intact so the
customer can retry. While a checkout is pending the cart is locked.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum

from shared.logging import get_logger
from storefront.cart import Cart
from storefront.catalog import sort_lessons, validate_sort
from storefront.checkout import build_order, validate_checkout_form
from storefront.client import LessonShopClient
from storefront.errors import CheckoutFailedError, StorefrontError
from storefront.models import CartItem, CheckoutForm, Lesson

logger = get_logger(__name__)


class CheckoutStage(Enum):
    BROWSING = "Browsing"
    CART_BUILDING = "CartBuilding"
    CHECKOUT_PENDING = "CheckoutPending"
    FAILED = "Failed"


class Page(Enum):
    CATALOG = "catalog"
    CART = "cart"


@dataclass
class StorefrontState:
    lessons: list[Lesson] = field(default_factory=list)
    cart: Cart = field(default_factory=Cart)
    form: CheckoutForm = field(default_factory=CheckoutForm)
    page: Page = Page.CATALOG
    sort_attribute: str = "subject"
    sort_order: str = "asc"
    search_query: str = ""
    stage: CheckoutStage = CheckoutStage.BROWSING
    last_error: str | None = None
    last_order_id: str | None = None


class Storefront:
    def __init__(self, client: LessonShopClient, state: StorefrontState | None = None) -> None:
        self.client = client
        self.state = state or StorefrontState()
        # Latest working copy of every lesson seen, including ones hidden by a search
        self._known: dict[str, Lesson] = {lesson.id: lesson for lesson in self.state.lessons}
        self._search_seq = 0

    # -------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------
    @property
    def sorted_lessons(self) -> list[Lesson]:
        return sort_lessons(self.state.lessons, self.state.sort_attribute, self.state.sort_order)

    @property
    def cart_item_count(self) -> int:
        return len(self.state.cart)

    @property
    def cart_total(self) -> float:
        return self.state.cart.total

    @property
    def is_checkout_form_valid(self) -> bool:
        return validate_checkout_form(self.state.form)

    @property
    def is_checkout_pending(self) -> bool:
        return self.state.stage is CheckoutStage.CHECKOUT_PENDING

    def can_add(self, lesson: Lesson) -> bool:
        return lesson.spaces > 0

    def find_lesson(self, lesson_id: str) -> Lesson | None:
        return self._known.get(lesson_id)

    # -------------------------------------------------------------------
    # Catalogue loading and search
    # -------------------------------------------------------------------
    def _show(self, lessons: list[Lesson]) -> None:
        self.state.cart.reservations.replay(lessons)
        for lesson in lessons:
            self._known[lesson.id] = lesson
        self.state.lessons = lessons

    async def load_lessons(self) -> bool:
        self._search_seq += 1
        seq = self._search_seq
        try:
            lessons = await self.client.fetch_lessons()
        except StorefrontError as exc:
            logger.error("fetch_lessons_failed", error=str(exc))
            self.state.last_error = "Failed to fetch lessons"
            return False

        if seq == self._search_seq:
            self._show(lessons)
        return True

    async def set_search_query(self, text: str) -> bool:
        """Search as you type: empty text reloads everything, anything else filters server-side."""
        self.state.search_query = text
        if not text:
            return await self.load_lessons()

        self._search_seq += 1
        seq = self._search_seq
        try:
            lessons = await self.client.search_lessons(text)
        except StorefrontError as exc:
            logger.error("search_lessons_failed", query=text, error=str(exc))
            self.state.last_error = "Failed to search lessons"
            return False

        # A newer keystroke has already been answered or is in flight
        if seq == self._search_seq:
            self._show(lessons)
        return True

    def set_sort(self, attribute: str, order: str = "asc") -> None:
        validate_sort(attribute, order)
        self.state.sort_attribute = attribute
        self.state.sort_order = order

    # -------------------------------------------------------------------
    # Pages
    # -------------------------------------------------------------------
    def show_catalog(self) -> None:
        self.state.page = Page.CATALOG

    def show_cart(self) -> None:
        self.state.page = Page.CART

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def add_to_cart(self, lesson: Lesson) -> bool:
        if self.is_checkout_pending:
            return False
        target = self.find_lesson(lesson.id)
        if target is None or not self.state.cart.add(target):
            return False
        self.state.stage = CheckoutStage.CART_BUILDING
        return True

    def remove_from_cart(self, item: CartItem) -> bool:
        if self.is_checkout_pending:
            return False
        removed = self.state.cart.remove(item, self.find_lesson(item.lesson_id))
        if removed:
            self.state.stage = CheckoutStage.CART_BUILDING if len(self.state.cart) else CheckoutStage.BROWSING
        return removed

    def abandon_cart(self) -> None:
        """Empty the cart and hand every reserved space back to the catalogue."""
        if self.is_checkout_pending:
            return
        self.state.cart.abandon(self._known)
        self.state.stage = CheckoutStage.BROWSING

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    async def submit_order(self) -> str | None:
        """Place the order and write back final space counts.

        Returns the new order id, or None when the form is invalid, the cart
        is empty or another checkout is still pending. Raises
        ``CheckoutFailedError`` when any call fails; calls that already
        succeeded are not undone.
        """
        cart = self.state.cart
        if self.is_checkout_pending or not self.is_checkout_form_valid or not len(cart):
            return None

        order = build_order(cart, self.state.form)
        space_updates = cart.space_updates(self._known)
        self.state.stage = CheckoutStage.CHECKOUT_PENDING
        self.state.last_error = None

        try:
            order_id = await self.client.create_order(order)
            results = await asyncio.gather(
                *(self.client.update_lesson(lesson_id, {"spaces": spaces}) for lesson_id, spaces in space_updates.items()),
                return_exceptions=True,
            )
            # Every update has settled before the first failure is reported
            for result in results:
                if isinstance(result, BaseException):
                    raise result
        except StorefrontError as exc:
            logger.error("checkout_failed", error=str(exc), units=len(order["lessons"]))
            self.state.stage = CheckoutStage.FAILED
            self.state.last_error = CheckoutFailedError.user_message
            raise CheckoutFailedError(str(exc)) from exc
        except BaseException:
            self.state.stage = CheckoutStage.FAILED
            raise

        logger.info("checkout_completed", order_id=order_id, units=len(order["lessons"]), lessons=len(space_updates))
        cart.clear()
        self.state.form.clear()
        self.state.page = Page.CATALOG
        self.state.last_order_id = order_id
        self.state.stage = CheckoutStage.BROWSING
        return order_id
