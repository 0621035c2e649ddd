"""Order aggregate (CQRS) — a completed purchase of lesson units.

Orders are created once at checkout and never modified. ``lessons`` holds
one lesson identifier per purchased unit, so buying two places on the same
lesson stores its identifier twice.
"""

import json
import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String, Text

from ordering.domain import ordering
from ordering.order.events import OrderPlaced

NAME_PATTERN = re.compile(r"^[A-Za-z\s]+$")
PHONE_PATTERN = re.compile(r"^\d+$", re.ASCII)


@ordering.aggregate
class Order:
    name = String(required=True, max_length=100, sanitize=False)
    phone = String(required=True, max_length=20, sanitize=False)
    lessons = Text(required=True, sanitize=False)  # JSON array of lesson ids
    placed_at = DateTime()

    @invariant.post
    def name_must_contain_only_letters_and_spaces(self):
        if self.name and not NAME_PATTERN.fullmatch(self.name):
            raise ValidationError({"name": ["Name may only contain letters and spaces"]})

    @invariant.post
    def phone_must_contain_only_digits(self):
        if self.phone and not PHONE_PATTERN.fullmatch(self.phone):
            raise ValidationError({"phone": ["Phone may only contain digits"]})

    @invariant.post
    def order_must_include_lessons(self):
        if self.lessons is not None and not json.loads(self.lessons):
            raise ValidationError({"lessons": ["An order must include at least one lesson"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, name, phone, lesson_ids):
        lesson_ids = [str(lesson_id) for lesson_id in lesson_ids]
        now = datetime.now(UTC)
        order = cls(
            name=name,
            phone=phone,
            lessons=json.dumps(lesson_ids),
            placed_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                name=name,
                phone=phone,
                lessons=order.lessons,
                unit_count=len(lesson_ids),
                placed_at=now,
            )
        )
        return order

    @property
    def lesson_ids(self):
        return json.loads(self.lessons) if self.lessons else []
