from fastapi import APIRouter

from textforge.api.v1.endpoints import detect, generate, pipeline, transformations

api_router = APIRouter()

api_router.include_router(
    transformations.router,
    prefix="/transformations",
    tags=["Transformations"],
)

api_router.include_router(
    pipeline.router,
    prefix="/pipeline",
    tags=["Pipeline"],
)

api_router.include_router(
    detect.router,
    prefix="/detect",
    tags=["Detection"],
)

api_router.include_router(
    generate.router,
    prefix="/generate",
    tags=["Generation"],
)
