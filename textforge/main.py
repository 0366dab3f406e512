from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from textforge import __version__
from textforge.api.v1.router import api_router
from textforge.core.config import get_settings
from textforge.core.logging import configure_logging

settings = get_settings()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Text Transformation Engine API. Encode, decode, hash and hide text "
            "through chained transformation pipelines, with reversibility "
            "warnings and automatic format detection."
        ),
        version=__version__,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "textforge.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
