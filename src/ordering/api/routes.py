"""FastAPI routes for the Ordering domain."""

import json

from fastapi import APIRouter, HTTPException
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from ordering.api.schemas import OrderIdResponse, PlaceOrderRequest
from ordering.order.placement import PlaceOrder

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    try:
        command = PlaceOrder(
            name=body.name,
            phone=body.phone,
            lessons=json.dumps(body.lessons),
        )
        result = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc
    return OrderIdResponse(order_id=result)
