"""
Rate Limiting
Slow down brute-force guessing of tokens on /check
"""

import time

from fastapi import HTTPException, Request, status


class RateLimiter:
    """Sliding window rate limiter keyed by client address."""

    def __init__(
        self,
        requests_per_minute: int = 30,
        requests_per_hour: int = 600,
        trust_forwarded: bool = False,
    ):
        self.rpm = requests_per_minute
        self.rph = requests_per_hour
        self.trust_forwarded = trust_forwarded

        # In-memory, per process; keys with no recent requests are dropped
        self.minute_buckets: dict[str, list[float]] = {}
        self.hour_buckets: dict[str, list[float]] = {}
        self._last_sweep = time.time()

    @property
    def enabled(self) -> bool:
        return self.rpm > 0 or self.rph > 0

    def _get_client_key(self, request: Request) -> str:
        """Get unique client identifier."""
        # Forwarding headers are client-controlled unless a proxy sets them
        if self.trust_forwarded:
            forwarded = request.headers.get("X-Forwarded-For")
            if forwarded:
                return forwarded.split(",")[0].strip()

            real_ip = request.headers.get("X-Real-IP")
            if real_ip:
                return real_ip

        return request.client.host if request.client else "unknown"

    def _cleanup_old_requests(self, bucket: list[float], window_seconds: int) -> list[float]:
        """Remove requests outside the time window."""
        cutoff = time.time() - window_seconds
        return [t for t in bucket if t > cutoff]

    def _refresh(self, client_key: str):
        minute = self._cleanup_old_requests(self.minute_buckets.pop(client_key, []), 60)
        hour = self._cleanup_old_requests(self.hour_buckets.pop(client_key, []), 3600)
        if minute:
            self.minute_buckets[client_key] = minute
        if hour:
            self.hour_buckets[client_key] = hour

    def _sweep(self):
        """Drop idle clients, at most once a minute."""
        if time.time() - self._last_sweep < 60:
            return
        self._last_sweep = time.time()
        for client_key in set(self.minute_buckets) | set(self.hour_buckets):
            self._refresh(client_key)

    def check_rate_limit(self, request: Request) -> bool:
        """Record the request and return False if it exceeds a limit."""
        if not self.enabled:
            return True

        self._sweep()
        client_key = self._get_client_key(request)
        self._refresh(client_key)

        if self.rpm and len(self.minute_buckets.get(client_key, [])) >= self.rpm:
            return False
        if self.rph and len(self.hour_buckets.get(client_key, [])) >= self.rph:
            return False

        now = time.time()
        self.minute_buckets.setdefault(client_key, []).append(now)
        self.hour_buckets.setdefault(client_key, []).append(now)
        return True

    def get_remaining(self, request: Request) -> dict[str, int]:
        """Get remaining requests for client, for the ceilings that are set."""
        client_key = self._get_client_key(request)
        self._refresh(client_key)

        remaining = {}
        if self.rpm:
            remaining["minute_remaining"] = max(
                0, self.rpm - len(self.minute_buckets.get(client_key, []))
            )
        if self.rph:
            remaining["hour_remaining"] = max(
                0, self.rph - len(self.hour_buckets.get(client_key, []))
            )
        return remaining


async def rate_limit(request: Request):
    """Dependency enforcing the application's check limiter."""
    limiter: RateLimiter = request.app.state.check_limiter

    if not limiter.check_rate_limit(request):
        remaining = limiter.get_remaining(request)
        headers = {"Retry-After": "60"}
        if "minute_remaining" in remaining:
            headers["X-RateLimit-Remaining-Minute"] = str(remaining["minute_remaining"])
        if "hour_remaining" in remaining:
            headers["X-RateLimit-Remaining-Hour"] = str(remaining["hour_remaining"])
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded",
            headers=headers,
        )
