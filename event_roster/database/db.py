import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from event_roster.core.config import get_database_url
from event_roster.core.exceptions import StorageFailureError

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def make_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        # request handlers and the test thread pools share the engine
        connect_args["check_same_thread"] = False
    engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)
    if url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = make_engine(get_database_url())
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    # models must be imported so they register with Base.metadata
    from event_roster.models import events, roster  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """
    Run the block as one unit of work: commit on success, roll back on error.
    Joins and commits a transaction the session already has open.
    Database errors surface as StorageFailureError.
    """
    try:
        if db.in_transaction():
            try:
                yield
                db.commit()
            except Exception:
                db.rollback()
                raise
        else:
            with db.begin():
                yield
    except SQLAlchemyError as e:
        logger.exception("Database transaction failed")
        raise StorageFailureError("Storage failure, please try again.") from e
