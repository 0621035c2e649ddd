"""Repository for the Lesson aggregate — the catalog store's read side."""

from protean.utils.query import Q

from catalogue.domain import catalogue
from catalogue.lesson.lesson import Lesson


@catalogue.repository(part_of=Lesson)
class LessonRepository:
    def list_all(self) -> list[Lesson]:
        """Return every lesson in the catalogue."""
        return self._dao.query.all().items

    def search(self, text: str) -> list[Lesson]:
        """Return lessons whose subject or location contains ``text``, ignoring case."""
        criteria = Q(subject__icontains=text) | Q(location__icontains=text)
        return self._dao.query.filter(criteria).all().items
