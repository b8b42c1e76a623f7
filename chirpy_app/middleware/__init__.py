from .metrics import MetricsMiddleware

__all__ = ["MetricsMiddleware"]
