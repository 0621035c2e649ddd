"""Order placement — command and handler."""

import json

from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class PlaceOrder:
    name = String(required=True, max_length=100, sanitize=False)
    phone = String(required=True, max_length=20, sanitize=False)
    lessons = Text(required=True, sanitize=False)  # JSON: list of lesson ids


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lesson_ids = json.loads(command.lessons) if isinstance(command.lessons, str) else command.lessons

        order = Order.place(
            name=command.name,
            phone=command.phone,
            lesson_ids=lesson_ids,
        )
        current_domain.repository_for(Order).add(order)
        logger.info("order_placed", order_id=str(order.id), units=len(lesson_ids))
        return str(order.id)
