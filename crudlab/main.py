"""
main.py - App factory for the three exercises

Each exercise is a separate FastAPI app with its own engine, routes and
seed data. The module-level apps let uvicorn serve one of them:

    uvicorn crudlab.main:musicos_app --port 3000

Business Rules:
- Schema sync + seed run once in the lifespan, before serving
- RecordValidationError → 409 {"errores": [...]}
- RecordNotFound → 404 {"error": ...}
- StoreError and anything unexpected → 500 {"error": ...}, logged

Called by: __main__.py, uvicorn, tests
Depends on: config, database, logging_config, routers, startup
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .config import APP_VERSION, get_settings
from .database import create_db_engine, make_session_factory
from .errors import INTERNAL_ERROR, RecordNotFound, RecordValidationError, StoreError
from .logging_config import setup_logging
from .routers import alumnos, musicos, proyectos
from .schemas.responses import ErrorResponse, ValidationErrorResponse
from .startup import run_startup


@dataclass(frozen=True)
class Exercise:
    title: str
    router: APIRouter


EXERCISES = {
    "musicos": Exercise("Músicos y canciones", musicos.router),
    "alumnos": Exercise("Alumnos y cursadas", alumnos.router),
    "proyectos": Exercise("Proyectos y programadores", proyectos.router),
}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RecordValidationError)
    async def _validation_failed(request: Request, exc: RecordValidationError):
        logger.info("{} {} rejected: {}", request.method, request.url.path, exc.messages)
        return JSONResponse(status_code=exc.status_code, content=ValidationErrorResponse(errores=exc.messages).model_dump())

    @app.exception_handler(RecordNotFound)
    async def _not_found(request: Request, exc: RecordNotFound):
        return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=exc.message).model_dump())

    @app.exception_handler(StoreError)
    async def _store_failed(request: Request, exc: StoreError):
        return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=exc.message).model_dump())

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
        return JSONResponse(status_code=500, content=ErrorResponse(error=INTERNAL_ERROR).model_dump())


def create_app(exercise: str) -> FastAPI:
    if exercise not in EXERCISES:
        raise ValueError(f"Unknown exercise: {exercise}")
    setup_logging()
    settings = get_settings()
    ex = EXERCISES[exercise]
    engine = create_db_engine(settings.database_url(exercise))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        run_startup(exercise, engine)
        logger.info("{} ready on port {}", ex.title, settings.port)
        yield
        engine.dispose()

    app = FastAPI(title=ex.title, version=APP_VERSION, lifespan=lifespan)
    app.state.exercise = exercise
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    register_exception_handlers(app)
    app.include_router(ex.router)
    return app


musicos_app = create_app("musicos")
alumnos_app = create_app("alumnos")
proyectos_app = create_app("proyectos")
