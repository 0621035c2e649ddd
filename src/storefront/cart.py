"""Shopping cart with optimistic space accounting.

The cart holds one entry per purchased unit. Every add takes a space from
the local lesson and every remove hands it back, so the catalogue view
always shows what would be left after checkout.
"""

from typing import Mapping

from storefront.ledger import ReservationLog
from storefront.models import CartItem, Lesson


class Cart:
    def __init__(self) -> None:
        self.items: list[CartItem] = []
        self.reservations = ReservationLog()

    def __len__(self) -> int:
        return len(self.items)

    @property
    def total(self) -> float:
        return sum(item.price for item in self.items)

    def add(self, lesson: Lesson) -> bool:
        """Put one unit of ``lesson`` in the cart. No-op when it has no spaces left."""
        if lesson.spaces <= 0:
            return False

        self.items.append(CartItem.from_lesson(lesson))
        lesson.spaces -= 1
        self.reservations.record(lesson.id, -1)
        return True

    def remove(self, item: CartItem, lesson: Lesson | None = None) -> bool:
        """Take one unit matching ``item`` out of the cart and return its space.

        Only the first entry with the same lesson id is removed.
        """
        index = next((i for i, entry in enumerate(self.items) if entry.lesson_id == item.lesson_id), None)
        if index is None:
            return False

        del self.items[index]
        if lesson is not None:
            lesson.spaces += 1
        self.reservations.record(item.lesson_id, +1)
        return True

    def lesson_ids(self) -> list[str]:
        """One lesson id per unit, in the order the units were added."""
        return [item.lesson_id for item in self.items]

    def space_updates(self, lessons: Mapping[str, Lesson]) -> dict[str, int]:
        """Final local space count for each distinct lesson in the cart.

        Lessons missing from ``lessons`` are skipped.
        """
        updates: dict[str, int] = {}
        for item in self.items:
            if item.lesson_id in updates:
                continue
            lesson = lessons.get(item.lesson_id)
            if lesson is not None:
                updates[item.lesson_id] = lesson.spaces
        return updates

    def clear(self) -> None:
        self.items.clear()
        self.reservations.commit()

    def abandon(self, lessons: Mapping[str, Lesson]) -> None:
        """Empty the cart and give every reserved space back to ``lessons``."""
        self.items.clear()
        self.reservations.rollback(lessons)
