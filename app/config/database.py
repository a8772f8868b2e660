from typing import Iterator

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import (
    DeclarativeBase,  # type: ignore
    Session,
    sessionmaker,
)

from app.config.logger import get_logger
from app.config.settings import settings

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def build_engine(url=None) -> Engine:
    return create_engine(url or settings.database_url, pool_pre_ping=True)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_connection(engine: Engine) -> bool:
    """Ping the store and make sure the users table exists. Failures are logged, not raised."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Error connecting to database at %s", engine.url.render_as_string(hide_password=True))
        return False
    logger.info("Connected to database successfully")
    return True


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
