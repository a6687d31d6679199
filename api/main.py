import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from api.routes import registrations
from config import Settings, settings as default_settings
from database.database import create_db_engine, create_session_factory, init_db
from services.registration_store import RegistrationStore
from services.validator import MISSING_FIELDS_MESSAGE

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Настройка логирования"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Создать приложение FastAPI

    Args:
        settings: Настройки (по умолчанию - из окружения)
        engine: Готовый engine БД; если не передан, создается из DATABASE_URL

    Returns:
        Приложение; подключение к БД устанавливается при старте (lifespan)
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_engine = engine is None
        db_engine = create_db_engine(settings.DATABASE_URL, echo=settings.debug) if owns_engine else engine

        # Без БД сервер не должен принимать запросы: StartupError прерывает запуск
        init_db(db_engine)
        app.state.store = RegistrationStore(create_session_factory(db_engine))
        logger.info("Registration API started")

        yield

        if owns_engine:
            db_engine.dispose()
        logger.info("Registration API stopped")

    app = FastAPI(title="Team Registration API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        # Тело не является JSON-объектом
        return JSONResponse(status_code=400, content={"message": MISSING_FIELDS_MESSAGE})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"message": registrations.STORE_ERROR_MESSAGE})

    app.include_router(registrations.router)

    @app.get("/")
    async def root():
        return {"message": "Team Registration API"}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


configure_logging(default_settings.debug)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=default_settings.API_HOST, port=default_settings.PORT)
