"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


class PlaceOrderRequest(BaseModel):
    name: str = Field(..., max_length=100)
    phone: str = Field(..., max_length=20)
    lessons: list[str]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ada Lovelace",
                    "phone": "07700900123",
                    "lessons": [
                        "3f1c1d9e-0c1e-4c55-9a1e-2b9f7f0c5a11",
                        "3f1c1d9e-0c1e-4c55-9a1e-2b9f7f0c5a11",
                    ],
                }
            ]
        }
    }


class OrderIdResponse(BaseModel):
    order_id: str
    message: str = "Order created successfully"
