"""Default catalogue loaded into an empty lesson store."""

from protean.utils.globals import current_domain

from catalogue.lesson.creation import AddLesson
from catalogue.lesson.lesson import Lesson
from shared.logging import get_logger

logger = get_logger(__name__)

DEFAULT_LESSONS = [
    {"subject": "Mathematics", "location": "Hendon", "price": 100, "icon": "fas fa-calculator"},
    {"subject": "English Language", "location": "Colindale", "price": 90, "icon": "fas fa-book-open"},
    {"subject": "Chemistry", "location": "Brent Cross", "price": 115, "icon": "fas fa-flask"},
    {"subject": "History", "location": "Golders Green", "price": 85, "icon": "fas fa-landmark"},
    {"subject": "Computer Science", "location": "Hendon", "price": 125, "icon": "fas fa-laptop-code"},
    {"subject": "Physics", "location": "Mill Hill", "price": 110, "icon": "fas fa-atom"},
    {"subject": "Art & Design", "location": "Colindale", "price": 75, "icon": "fas fa-palette"},
    {"subject": "Geography", "location": "Wembley", "price": 95, "icon": "fas fa-globe-europe"},
    {"subject": "Music", "location": "Golders Green", "price": 80, "icon": "fas fa-music"},
    {"subject": "Biology", "location": "Brent Cross", "price": 115, "icon": "fas fa-dna"},
]

DEFAULT_SPACES = 5


def image_name(subject: str) -> str:
    """Image filename for a subject, e.g. ``Art & Design`` -> ``art-design.png``."""
    words = "".join(ch if ch.isalnum() else " " for ch in subject.lower()).split()
    return "-".join(words) + ".png"


def seed_lessons(lessons=None, spaces=DEFAULT_SPACES) -> int:
    """Add the default lessons when the catalogue is empty.

    Must run inside the catalogue domain context. Returns the number of
    lessons added; an already populated catalogue is left alone.
    """
    repo = current_domain.repository_for(Lesson)
    if repo.list_all():
        logger.info("catalogue_already_seeded")
        return 0

    added = 0
    for data in lessons if lessons is not None else DEFAULT_LESSONS:
        current_domain.process(
            AddLesson(
                subject=data["subject"],
                location=data["location"],
                price=data["price"],
                spaces=data.get("spaces", spaces),
                image=data.get("image") or image_name(data["subject"]),
                icon=data.get("icon"),
            ),
            asynchronous=False,
        )
        added += 1

    logger.info("catalogue_seeded", lessons=added)
    return added
