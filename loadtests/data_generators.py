"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the services' validation rules
(letters-and-spaces names, digits-only phones, non-negative spaces) and match
the field names expected by the API's Pydantic request schemas.
"""

import random
import re

from faker import Faker

fake = Faker("en_GB")

SUBJECTS = [
    "Mathematics",
    "English Language",
    "Chemistry",
    "History",
    "Computer Science",
    "Physics",
    "Art and Design",
    "Geography",
    "Music",
    "Biology",
]

SEARCH_TERMS = ["math", "eng", "chem", "hendon", "colindale", "golders", "mill", "sci", "art", "o"]

# ---------- Ordering Domain ----------


def customer_name() -> str:
    """Generate a name matching ``^[A-Za-z\\s]+$``.

    Faker names can carry apostrophes, hyphens and accents, so those are
    stripped and a fallback keeps the result non-empty.
    """
    name = re.sub(r"[^A-Za-z\s]", "", f"{fake.first_name()} {fake.last_name()}").strip()
    return name[:100] or "Load Tester"


def customer_phone() -> str:
    """Generate a digits-only UK mobile number."""
    return "07" + "".join(str(random.randint(0, 9)) for _ in range(9))


def order_data(lesson_ids: list[str]) -> dict:
    """Generate a PlaceOrderRequest payload, one id per purchased unit."""
    return {
        "name": customer_name(),
        "phone": customer_phone(),
        "lessons": list(lesson_ids),
    }


# ---------- Catalogue Domain ----------


def lesson_data(spaces: int | None = None) -> dict:
    """Generate an AddLessonRequest payload."""
    subject = random.choice(SUBJECTS)
    return {
        "subject": subject,
        "location": fake.city()[:100],
        "price": float(random.choice([75, 80, 85, 90, 95, 100, 110, 115, 125])),
        "spaces": spaces if spaces is not None else random.randint(1, 10),
        "image": subject.lower().replace(" ", "-") + ".png",
    }


def search_term() -> str:
    return random.choice(SEARCH_TERMS)
