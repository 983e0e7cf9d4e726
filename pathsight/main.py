"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pathsight.config import settings
from pathsight.exceptions import ParseError, PathError
from pathsight.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pathsight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def path_error_handler(request: Request, exc: PathError) -> JSONResponse:
    position = exc.position if isinstance(exc, ParseError) else None
    logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    body = ErrorResponse(type=type(exc).__name__, message=exc.message, position=position)
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app() -> FastAPI:
    app = FastAPI(
        title="PathSight",
        description="SVG path data engine — parse, convert, measure and transform paths",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PathError, path_error_handler)

    # Importing the engine registers every converter
    from pathsight.api.router import api_router

    app.include_router(api_router)
    logger.info("PathSight started (%s)", settings.pathsight_env)

    return app


app = create_app()
