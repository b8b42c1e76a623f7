import uuid

from sqlalchemy import Column, DateTime, String, Uuid
from sqlalchemy.orm import relationship

from chirpy_app.database.connection import Base


class User(Base):
    """
    A Chirpy account.

    Users are created once and never updated in this service. They are only
    removed in bulk by the dev-mode reset, which also removes their chirps.
    """
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    # unique=True creates the index
    email = Column(String, unique=True, nullable=False)

    chirps = relationship("Chirp", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
