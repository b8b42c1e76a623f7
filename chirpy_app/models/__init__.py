"""
Database models for Chirpy.

The hit counter is process state, not a table (see services/metrics.py).
"""

from .user import User
from .chirp import Chirp

__all__ = ["User", "Chirp"]
