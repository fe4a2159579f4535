from typing import Optional
import logging

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from todo_clock.app.middleware.access_log import AccessLogMiddleware
from todo_clock.app.routes import clock_ws, todos
from todo_clock.config import Settings, load_settings
from todo_clock.domain.errors import TodoNotFound
from todo_clock.infra.store.todo_store_memory import InMemoryTodoStore
from todo_clock.observability.logging import setup_logging
from todo_clock.services.todo_service import TodoService

logger = logging.getLogger("todo_clock.system")


def create_app(settings: Optional[Settings] = None, store: Optional[InMemoryTodoStore] = None) -> FastAPI:
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_dir)
    logger.info("system.start", extra={"category": "system", "event": "system.start"})

    app = FastAPI(title="Todo Clock")
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- in-memory wiring ---
    app.state.settings = settings
    app.state.todo_service = TodoService(store if store is not None else InMemoryTodoStore())

    @app.exception_handler(TodoNotFound)
    async def _todo_not_found(request: Request, exc: TodoNotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    # Routers
    app.include_router(todos.router)
    app.include_router(clock_ws.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


def serve() -> None:
    settings = load_settings()
    app = create_app(settings)
    logger.info(
        "system.listen",
        extra={"category": "system", "event": "system.listen", "host": settings.host, "port": settings.port},
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
