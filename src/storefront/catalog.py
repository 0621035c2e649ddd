"""Sorted views over the loaded catalogue."""

from functools import cmp_to_key

from storefront.models import Lesson

SORT_ATTRIBUTES = ("subject", "location", "price", "spaces")
SORT_ORDERS = ("asc", "desc")


def _sort_key(value):
    return value.lower() if isinstance(value, str) else value


def validate_sort(attribute: str, order: str) -> None:
    if attribute not in SORT_ATTRIBUTES:
        raise ValueError(f"Cannot sort lessons by {attribute!r}")
    if order not in SORT_ORDERS:
        raise ValueError(f"Sort order must be 'asc' or 'desc', got {order!r}")


def sort_lessons(lessons: list[Lesson], attribute: str = "subject", order: str = "asc") -> list[Lesson]:
    """Return a sorted copy of ``lessons``. Text attributes compare case-insensitively."""
    validate_sort(attribute, order)
    direction = 1 if order == "asc" else -1

    def compare(a: Lesson, b: Lesson) -> int:
        a_value = _sort_key(getattr(a, attribute))
        b_value = _sort_key(getattr(b, attribute))
        if a_value < b_value:
            return -direction
        if a_value > b_value:
            return direction
        return 0

    return sorted(lessons, key=cmp_to_key(compare))
