"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
State mirrors what the storefront keeps between requests: the catalogue it
last saw and the cart it is building against it.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks state for a single simulated shopper's visit."""

    # lesson id -> spaces as last seen, minus units already in the cart
    spaces: dict[str, int] = field(default_factory=dict)
    cart: list[str] = field(default_factory=list)
    order_id: str | None = None

    def load(self, lessons: list[dict]) -> None:
        self.spaces = {lesson["id"]: lesson["spaces"] for lesson in lessons}
        self.cart.clear()

    def take(self, lesson_id: str) -> bool:
        if self.spaces.get(lesson_id, 0) <= 0:
            return False
        self.spaces[lesson_id] -= 1
        self.cart.append(lesson_id)
        return True

    def space_updates(self) -> dict[str, int]:
        return {lesson_id: self.spaces[lesson_id] for lesson_id in dict.fromkeys(self.cart)}


@dataclass
class RaceState:
    """Tracks the lesson two shoppers compete for in the oversell race."""

    lesson_id: str | None = None
    seen_spaces: int = 0
