"""Request middleware package."""

from .rate_limit import RateLimiter, rate_limit

__all__ = ["RateLimiter", "rate_limit"]
