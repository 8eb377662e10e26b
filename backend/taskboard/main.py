"""Main FastAPI application for the task board."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import load_config
from .routers import board_router, tasks_router
from .services.board import BoardStore, build_board
from .services.drag import DragSession
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    config = load_config()
    setup_logging()
    logger.info("Starting task board...")

    board = build_board(config.board)
    app.state.board_store = BoardStore(board)
    app.state.drag_session = DragSession(app.state.board_store)

    # Log configuration info
    logger.info(f"Server: {config.server.host}:{config.server.port}")
    logger.info(f"Debug mode: {config.server.debug}")
    logger.info(
        f"Board initialized: {len(board.columns)} columns, {len(board.task_ids())} tasks"
    )

    yield

    # Shutdown
    logger.info("Shutting down task board...")


app = FastAPI(
    title="Task Board",
    description="Drag-and-drop task board for the community portal admin area",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware (for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=load_config().cors.allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routers
app.include_router(board_router)
app.include_router(tasks_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the API envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation errors in the API envelope."""
    logger.debug(f"Validation failed for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


# Health check endpoint
@app.get("/api/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "taskboard"}


def run() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    config = load_config()
    uvicorn.run(
        "taskboard.main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.debug,
    )


if __name__ == "__main__":
    run()
