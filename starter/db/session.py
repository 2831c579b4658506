from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from starter.core.config import Settings, get_settings


def build_engine(settings: Settings) -> Engine:
    """Engine for settings.database_url: Supabase Postgres in production, SQLite locally."""
    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        # SQLite connections are shared across FastAPI's worker threads
        connect_args["check_same_thread"] = False
    return create_engine(settings.database_url, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Created once per process and reused for its lifetime.
engine = build_engine(get_settings())
SessionLocal = build_session_factory(engine)


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
