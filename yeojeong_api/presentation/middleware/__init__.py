from .correlation import CorrelationIdMiddleware

__all__ = [
    "CorrelationIdMiddleware",
]
