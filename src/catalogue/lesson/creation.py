"""Lesson creation — command and handler."""

from protean import handle
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.lesson.lesson import Lesson


@catalogue.command(part_of="Lesson")
class AddLesson:
    subject: String(required=True, max_length=100, sanitize=False)
    location: String(required=True, max_length=100, sanitize=False)
    price: Float(required=True, min_value=0.0)
    spaces: Integer(required=True, min_value=0)
    image: String(max_length=255, sanitize=False)
    icon: String(max_length=100, sanitize=False)


@catalogue.command_handler(part_of=Lesson)
class AddLessonHandler:
    @handle(AddLesson)
    def add_lesson(self, command):
        lesson = Lesson.create(
            subject=command.subject,
            location=command.location,
            price=command.price,
            spaces=command.spaces,
            image=command.image,
            icon=command.icon,
        )
        current_domain.repository_for(Lesson).add(lesson)
        return str(lesson.id)
