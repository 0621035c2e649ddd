"""Reversible log of optimistic space changes made on the client.

Adding a unit to the cart takes a space from the local lesson before the
server knows about it; removing it gives the space back. Each change is
recorded here so the whole set can be committed after a successful
checkout, rolled back when the cart is abandoned, or replayed onto a
freshly fetched copy of the catalogue.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping

from storefront.models import Lesson


@dataclass(frozen=True)
class Reservation:
    lesson_id: str
    delta: int  # -1 takes a space, +1 returns one


class ReservationLog:
    def __init__(self) -> None:
        self._entries: list[Reservation] = []
        # Server count of lessons refetched while changes were pending
        self._fetched: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def record(self, lesson_id: str, delta: int) -> None:
        self._entries.append(Reservation(lesson_id=lesson_id, delta=delta))

    def net(self) -> dict[str, int]:
        """Net space change per lesson, omitting lessons that balance out."""
        totals: Counter[str] = Counter()
        for entry in self._entries:
            totals[entry.lesson_id] += entry.delta
        return {lesson_id: delta for lesson_id, delta in totals.items() if delta}

    def replay(self, lessons: Iterable[Lesson]) -> None:
        """Apply the pending net changes to lessons fetched from the server.

        The view never drops below zero, and the fetched count is kept so a
        rollback can return to it.
        """
        pending = self.net()
        for lesson in lessons:
            if lesson.id in pending:
                self._fetched[lesson.id] = lesson.spaces
                lesson.spaces = max(0, lesson.spaces + pending[lesson.id])

    def commit(self) -> None:
        """Forget the recorded changes; the server now holds them."""
        self._entries.clear()
        self._fetched.clear()

    def rollback(self, lessons: Mapping[str, Lesson]) -> None:
        """Undo every recorded change on the given lessons, newest first.

        Lessons refetched while changes were pending go back to the fetched
        count instead.
        """
        for entry in reversed(self._entries):
            lesson = lessons.get(entry.lesson_id)
            if lesson is not None and entry.lesson_id not in self._fetched:
                lesson.spaces -= entry.delta
        for lesson_id, spaces in self._fetched.items():
            lesson = lessons.get(lesson_id)
            if lesson is not None:
                lesson.spaces = spaces
        self._entries.clear()
        self._fetched.clear()
