"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Lesson Request Schemas ---


class AddLessonRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "subject": "Mathematics",
                    "location": "Hendon",
                    "price": 100,
                    "spaces": 5,
                    "image": "mathematics.png",
                    "icon": "fas fa-calculator",
                }
            ]
        }
    }

    subject: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0)
    spaces: int = Field(..., ge=0)
    image: str | None = Field(None, max_length=255)
    icon: str | None = Field(None, max_length=100)


class UpdateLessonRequest(BaseModel):
    """Fields merged into an existing lesson. Omitted fields are left as they are."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"spaces": 2},
            ]
        }
    }

    subject: str | None = Field(None, min_length=1, max_length=100)
    location: str | None = Field(None, min_length=1, max_length=100)
    price: float | None = Field(None, ge=0)
    spaces: int | None = None
    image: str | None = Field(None, max_length=255)
    icon: str | None = Field(None, max_length=100)


# --- Response Schemas ---


class LessonResponse(BaseModel):
    id: str
    subject: str
    location: str
    price: float
    spaces: int
    image: str | None = None
    icon: str | None = None

    @classmethod
    def from_lesson(cls, lesson) -> LessonResponse:
        return cls(
            id=str(lesson.id),
            subject=lesson.subject,
            location=lesson.location,
            price=lesson.price,
            spaces=lesson.spaces,
            image=lesson.image,
            icon=lesson.icon,
        )


class LessonIdResponse(BaseModel):
    lesson_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
