"""Main API router aggregating all module routers."""

from fastapi import APIRouter

from gradetrack.api.v1.endpoints import exams
from gradetrack.schemas.common import ErrorResponse

api_router = APIRouter()

# Exams
api_router.include_router(
    exams.router,
    prefix="/exams",
    tags=["Exams"],
    responses={
        404: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
