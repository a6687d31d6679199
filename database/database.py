import logging
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from services.exceptions import StartupError

logger = logging.getLogger(__name__)


def create_db_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """Создать engine (пул соединений) для указанной БД"""
    connect_args = {"check_same_thread": False} if "sqlite" in database_url else {}
    return create_engine(database_url, echo=echo, connect_args=connect_args, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Инициализация БД - проверка соединения и создание таблиц"""
    from database.models import Base
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error(f"Failed to connect to database: {e}")
        raise StartupError(e) from e
    logger.info("Connected to database")
