from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from healthcare_api.core.config import settings
from healthcare_api.core.exceptions import register_exception_handlers
from healthcare_api.core.logging import setup_logging
from healthcare_api.api.api import api_router
from healthcare_api.middleware.request_logging import RequestLoggingMiddleware


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        openapi_url="/swagger.json",
        docs_url="/api-docs",
        redoc_url="/redoc",
        servers=[{"url": f"http://localhost:{settings.PORT}"}],
    )

    # Set all CORS enabled origins
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials="*" not in settings.BACKEND_CORS_ORIGINS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router)
    return app


setup_logging()
app = create_app()


def run() -> None:
    import uvicorn

    logger.info(f"{settings.PROJECT_NAME} running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
