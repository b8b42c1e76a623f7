"""
SQLAlchemy engine and session setup.

Sessions come from get_session_factory; dependencies.get_storage opens one
per request, only for the SQLAlchemy backend, and closes it afterwards.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from chirpy_app.config import settings


connect_args = {}
if settings.db_url.startswith("sqlite"):
    # FastAPI runs sync handlers on a threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(settings.db_url, connect_args=connect_args)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()


def get_session_factory() -> sessionmaker:
    """Session factory used by request dependencies (overridden in tests)"""
    return SessionLocal
