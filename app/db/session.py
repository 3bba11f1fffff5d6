from __future__ import annotations

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with FK enforcement off; ON DELETE CASCADE needs it per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> Engine:
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")

    if _is_sqlite(url):
        # Handlers run in FastAPI's threadpool, so pooled sqlite connections cross threads
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_engine(url, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
