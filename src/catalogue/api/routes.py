"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    AddLessonRequest,
    LessonIdResponse,
    LessonResponse,
    StatusResponse,
    UpdateLessonRequest,
)
from catalogue.lesson.creation import AddLesson
from catalogue.lesson.lesson import Lesson
from catalogue.lesson.updates import UpdateLesson
from catalogue.shared.images import resolve_image
from shared.logging import get_logger

logger = get_logger(__name__)

lesson_router = APIRouter(prefix="/lessons", tags=["lessons"])
search_router = APIRouter(prefix="/search", tags=["lessons"])
image_router = APIRouter(prefix="/images", tags=["images"])


# --- Lesson endpoints ---


@lesson_router.get("", response_model=list[LessonResponse])
async def list_lessons() -> list[LessonResponse]:
    lessons = current_domain.repository_for(Lesson).list_all()
    return [LessonResponse.from_lesson(lesson) for lesson in lessons]


@lesson_router.post("", status_code=201, response_model=LessonIdResponse)
async def add_lesson(body: AddLessonRequest) -> LessonIdResponse:
    try:
        command = AddLesson(
            subject=body.subject,
            location=body.location,
            price=body.price,
            spaces=body.spaces,
            image=body.image,
            icon=body.icon,
        )
        result = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc
    return LessonIdResponse(lesson_id=result)


@lesson_router.put("/{lesson_id}", response_model=StatusResponse)
async def update_lesson(lesson_id: str, body: UpdateLessonRequest) -> StatusResponse:
    try:
        command = UpdateLesson(
            lesson_id=lesson_id,
            subject=body.subject,
            location=body.location,
            price=body.price,
            spaces=body.spaces,
            image=body.image,
            icon=body.icon,
        )
        current_domain.process(command, asynchronous=False)
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Lesson not found") from exc
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc

    logger.info("lesson_updated", lesson_id=lesson_id, fields=sorted(body.model_dump(exclude_none=True)))
    return StatusResponse()


# --- Search ---


@search_router.get("", response_model=list[LessonResponse])
async def search_lessons(q: str | None = None) -> list[LessonResponse]:
    if not q:
        raise HTTPException(status_code=400, detail="Search query (q) is required")

    lessons = current_domain.repository_for(Lesson).search(q)
    return [LessonResponse.from_lesson(lesson) for lesson in lessons]


# --- Images ---


@image_router.get("/{filename:path}")
async def get_image(filename: str):
    path = resolve_image(filename)
    if path is None:
        logger.info("image_not_found", requested=filename)
        return JSONResponse(status_code=404, content={"message": "Error: Image not found"})
    return FileResponse(path)
