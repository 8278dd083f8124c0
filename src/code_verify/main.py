"""Code-Verify FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from code_verify.config import Settings, settings
from code_verify.routers import api
from code_verify.templates import render_index

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application from explicit settings."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info(
            "Code-Verify ready, allowed origins: %s", app_settings.cors_origins
        )
        yield

    app = FastAPI(
        title="Code-Verify",
        description="Six-digit verification code entry and checking",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, api.invalid_request_handler)
    app.include_router(api.router)

    @app.get("/", response_class=HTMLResponse)
    def root():
        """Serve the code entry page."""
        return render_index(app_settings.api_base_url)

    return app


app = create_app()


def main():
    """Run the application."""
    configure_logging(settings.log_level)
    uvicorn.run(
        "code_verify.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
