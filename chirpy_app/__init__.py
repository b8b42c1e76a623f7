"""Chirpy: a small FastAPI service for users and short posts (chirps)."""

__version__ = "1.0.0"
