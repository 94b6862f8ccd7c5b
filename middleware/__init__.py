"""Middleware package."""
from .rate_limit import RateLimitConfig, RateLimitMiddleware, RequestWindow

__all__ = ["RateLimitConfig", "RateLimitMiddleware", "RequestWindow"]
