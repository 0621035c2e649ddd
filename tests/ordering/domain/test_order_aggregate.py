"""Tests for the Order aggregate root."""

import json

import pytest
from ordering.order.events import OrderPlaced
from ordering.order.order import Order
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields

LESSON_A = "3f1c1d9e-0c1e-4c55-9a1e-2b9f7f0c5a11"
LESSON_B = "8b0e6f2a-5d1b-4f7e-9c3a-1a2b3c4d5e6f"


class TestOrderConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Order.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Order)
        assert "name" in fields
        assert "phone" in fields
        assert "lessons" in fields
        assert "placed_at" in fields

    def test_place_order(self):
        order = Order.place(name="Ada Lovelace", phone="07700900123", lesson_ids=[LESSON_A])
        assert order.name == "Ada Lovelace"
        assert order.phone == "07700900123"
        assert order.lesson_ids == [LESSON_A]
        assert order.placed_at is not None

    def test_one_entry_per_unit(self):
        order = Order.place(name="Ada", phone="123", lesson_ids=[LESSON_A, LESSON_A, LESSON_B])
        assert order.lesson_ids == [LESSON_A, LESSON_A, LESSON_B]
        assert json.loads(order.lessons) == [LESSON_A, LESSON_A, LESSON_B]


class TestOrderInvariants:
    @pytest.mark.parametrize("name", ["Ada1", "R2D2", "Ada-Lovelace", "Ada!"])
    def test_name_rejects_non_letters(self, name):
        with pytest.raises(ValidationError) as exc:
            Order.place(name=name, phone="123", lesson_ids=[LESSON_A])
        assert "name" in exc.value.messages

    @pytest.mark.parametrize("phone", ["0770a", "+447700", "0770 900", "phone", "\u0660\u0667\u0667\u0660\u0660"])
    def test_phone_rejects_non_digits(self, phone):
        with pytest.raises(ValidationError) as exc:
            Order.place(name="Ada", phone=phone, lesson_ids=[LESSON_A])
        assert "phone" in exc.value.messages

    def test_empty_lessons_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Order.place(name="Ada", phone="123", lesson_ids=[])
        assert "lessons" in exc.value.messages

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Order.place(name=None, phone="123", lesson_ids=[LESSON_A])


class TestOrderPlacedEvent:
    def test_place_raises_event(self):
        order = Order.place(name="Ada", phone="123", lesson_ids=[LESSON_A, LESSON_A])
        assert len(order._events) == 1

        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_id == str(order.id)
        assert event.unit_count == 2
        assert json.loads(event.lessons) == [LESSON_A, LESSON_A]

    def test_version(self):
        order = Order.place(name="Ada", phone="123", lesson_ids=[LESSON_A])
        assert order._events[0].__version__ == 1
