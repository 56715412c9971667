from typing import Generator

from sqlmodel import SQLModel, create_engine, Session

from .config import settings


# SQLite needs cross-thread access for the TestClient and uvicorn workers
if settings.database_url.startswith("sqlite"):
    engine = create_engine(
        settings.database_url,
        echo=settings.debug,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(settings.database_url, echo=settings.debug)


def init_db(bind=None):
    # Import models so every table is registered on the metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(bind if bind is not None else engine)


def get_session() -> Generator[Session, None, None]:
    session = Session(engine)
    try:
        yield session
    finally:
        session.close()
