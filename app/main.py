"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes
from app.api.errors import register_exception_handlers
from app.config.settings import Settings, get_settings
from app.logging.logger import Log
from app.processor.processor import Processor, build_processor


def create_app(settings: Settings | None = None, processor: Processor | None = None) -> FastAPI:
    """Create the application.

    Executors and the processor are built on startup and shut down on exit.
    A ready-made ``processor`` can be passed in to replace the default one.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        Log.configure(settings.log_level)
        executor = ThreadPoolExecutor(
            max_workers=settings.extraction_workers, thread_name_prefix="extract"
        )
        remote_executor = ThreadPoolExecutor(
            max_workers=settings.extraction_workers, thread_name_prefix="ai"
        )
        app.state.settings = settings
        app.state.executor = executor
        app.state.processor = processor or build_processor(
            settings, remote_executor=remote_executor
        )
        Log.info(f"Document intake started (env={settings.app_env})")
        try:
            yield
        finally:
            Log.info("Shutting down extraction workers")
            executor.shutdown(wait=False, cancel_futures=True)
            remote_executor.shutdown(wait=False, cancel_futures=True)

    app = FastAPI(title="Document Intake", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(routes.router)
    return app


def main() -> None:
    """Entry point: load settings -> configure logging -> serve."""
    settings = get_settings()
    Log.configure(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
