"""Domain events for the Lesson aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Lesson")
class LessonAdded:
    """A new lesson was published to the catalogue."""

    __version__ = 1

    lesson_id: Identifier(required=True)
    subject: String(required=True, sanitize=False)
    location: String(required=True, sanitize=False)
    price: Float(required=True)
    spaces: Integer(required=True)
    added_at: DateTime(required=True)


@catalogue.event(part_of="Lesson")
class LessonDetailsUpdated:
    """Descriptive fields of a lesson (subject, location, price, image) changed."""

    __version__ = 1

    lesson_id: Identifier(required=True)
    subject: String(required=True, sanitize=False)
    location: String(required=True, sanitize=False)
    price: Float(required=True)
    image: String(sanitize=False)


@catalogue.event(part_of="Lesson")
class LessonSpacesChanged:
    """The number of open spaces on a lesson was overwritten.

    Carries the count before and after the write.
    """

    __version__ = 1

    lesson_id: Identifier(required=True)
    previous_spaces: Integer(required=True)
    spaces: Integer(required=True)
    changed_at: DateTime(required=True)
