"""Client-side views of lessons, cart entries and the checkout form."""

from dataclasses import dataclass


@dataclass
class Lesson:
    """Working copy of a catalogue lesson. ``spaces`` is mutated optimistically."""

    id: str
    subject: str
    location: str
    price: float
    spaces: int
    image: str | None = None
    icon: str | None = None

    @classmethod
    def from_payload(cls, payload: dict) -> "Lesson":
        return cls(
            id=str(payload.get("id") or payload["_id"]),
            subject=payload["subject"],
            location=payload["location"],
            price=payload["price"],
            spaces=int(payload["spaces"]),
            image=payload.get("image"),
            icon=payload.get("icon"),
        )


@dataclass(frozen=True)
class CartItem:
    """Snapshot of a lesson taken when one unit of it was added to the cart."""

    lesson_id: str
    subject: str
    location: str
    price: float
    image: str | None = None

    @classmethod
    def from_lesson(cls, lesson: Lesson) -> "CartItem":
        return cls(
            lesson_id=lesson.id,
            subject=lesson.subject,
            location=lesson.location,
            price=lesson.price,
            image=lesson.image,
        )


@dataclass
class CheckoutForm:
    name: str = ""
    phone: str = ""

    def clear(self) -> None:
        self.name = ""
        self.phone = ""
