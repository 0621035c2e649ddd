"""Lesson aggregate root — a tutoring lesson with a bounded number of spaces."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String

from catalogue.domain import catalogue


@catalogue.aggregate
class Lesson:
    """Lesson aggregate root."""

    subject: String(required=True, max_length=100, sanitize=False)
    location: String(required=True, max_length=100, sanitize=False)
    price: Float(required=True, min_value=0.0)
    spaces: Integer(required=True, min_value=0)
    image: String(max_length=255, sanitize=False)
    icon: String(max_length=100, sanitize=False)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def subject_and_location_must_not_be_blank(self):
        if self.subject is not None and not self.subject.strip():
            raise ValidationError({"subject": ["Subject cannot be blank"]})
        if self.location is not None and not self.location.strip():
            raise ValidationError({"location": ["Location cannot be blank"]})

    @classmethod
    def create(cls, subject, location, price, spaces, image=None, icon=None):
        from catalogue.lesson.events import LessonAdded

        now = datetime.now(UTC)
        lesson = cls(
            subject=subject,
            location=location,
            price=price,
            spaces=spaces,
            image=image,
            icon=icon,
            created_at=now,
            updated_at=now,
        )
        lesson.raise_(
            LessonAdded(
                lesson_id=lesson.id,
                subject=subject,
                location=location,
                price=price,
                spaces=spaces,
                added_at=now,
            )
        )
        return lesson

    def update(self, subject=None, location=None, price=None, spaces=None, image=None, icon=None):
        """Merge the given fields into the lesson. ``None`` leaves a field untouched."""
        from catalogue.lesson.events import LessonDetailsUpdated

        details = {
            "subject": subject,
            "location": location,
            "price": price,
            "image": image,
            "icon": icon,
        }
        details = {name: value for name, value in details.items() if value is not None}

        for name, value in details.items():
            setattr(self, name, value)

        if spaces is not None:
            self.set_spaces(spaces)

        if details:
            self.updated_at = datetime.now(UTC)
            self.raise_(
                LessonDetailsUpdated(
                    lesson_id=self.id,
                    subject=self.subject,
                    location=self.location,
                    price=self.price,
                    image=self.image,
                )
            )

    def set_spaces(self, spaces):
        """Overwrite the open space count with an absolute value.

        There is no compare-and-set: concurrent writers overwrite each
        other and the last write wins.
        """
        from catalogue.lesson.events import LessonSpacesChanged

        previous_spaces = self.spaces
        self.spaces = spaces
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            LessonSpacesChanged(
                lesson_id=self.id,
                previous_spaces=previous_spaces,
                spaces=spaces,
                changed_at=now,
            )
        )
