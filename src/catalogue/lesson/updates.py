"""Lesson updates — merge client-supplied fields into a stored lesson."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.lesson.lesson import Lesson
from catalogue.shared.identifiers import ensure_well_formed_lesson_id


@catalogue.command(part_of="Lesson")
class UpdateLesson:
    lesson_id: Identifier(required=True)
    subject: String(max_length=100, sanitize=False)
    location: String(max_length=100, sanitize=False)
    price: Float(min_value=0.0)
    spaces: Integer(min_value=0)
    image: String(max_length=255, sanitize=False)
    icon: String(max_length=100, sanitize=False)


@catalogue.command_handler(part_of=Lesson)
class UpdateLessonHandler:
    @handle(UpdateLesson)
    def update_lesson(self, command):
        ensure_well_formed_lesson_id(command.lesson_id)

        repo = current_domain.repository_for(Lesson)
        lesson = repo.get(command.lesson_id)
        lesson.update(
            subject=command.subject,
            location=command.location,
            price=command.price,
            spaces=command.spaces,
            image=command.image,
            icon=command.icon,
        )
        repo.add(lesson)
