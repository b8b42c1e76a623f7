from .connection import Base, SessionLocal, engine, get_session_factory

__all__ = ["Base", "SessionLocal", "engine", "get_session_factory"]
