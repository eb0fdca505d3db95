"""
RoadTOTP - Main FastAPI Application
TOTP secrets, tokens, checks and enrollment QR codes over HTTP

Run with the ``roadtotp`` console script, or
``uvicorn --factory roadtotp.main:create_app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import Settings
from .errors import InvalidArgument, InvalidSecretEncoding
from .middleware.rate_limit import RateLimiter, rate_limit
from .models import ErrorResponse, SecretResponse, TokenResponse
from .otp import (
    build_url,
    current_token,
    derive_token,
    derive_token_seconds,
    generate_secret,
    validate,
    validate_now,
    validate_seconds,
)
from .qr import generate_qr_png

logger = logging.getLogger(__name__)

router = APIRouter()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management."""
    settings: Settings = app.state.settings
    logger.info("RoadTOTP starting on %s:%d", settings.host, settings.port)
    yield
    logger.info("RoadTOTP shutting down")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _error(code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content=ErrorResponse(code=code, message=message).model_dump(),
        headers=headers,
    )


# Routes
@router.get("/")
async def root():
    """API information."""
    return {
        "name": "RoadTOTP",
        "version": __version__,
        "description": "Time-based One-Time Password Service",
        "endpoints": {
            "secret": "GET /secret",
            "token": "GET /token/{secret}?millisec=|unixtime=",
            "check": "GET /check?secret=&token=&millisec=|unixtime=&window=",
            "image": "GET /image?label=&secret=&size=",
        },
    }


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "service": "roadtotp"}


@router.get("/secret", response_model=SecretResponse)
def get_secret():
    """Generate a new shared secret."""
    return SecretResponse(secret=generate_secret())


@router.get("/token/{secret}", response_model=TokenResponse)
def get_token(
    secret: str,
    millisec: Optional[int] = None,
    unixtime: Optional[int] = None,
):
    """Token for the given time, or for now when no time is given."""
    if millisec is not None:
        totp = derive_token(secret, millisec)
    elif unixtime is not None:
        totp = derive_token_seconds(secret, unixtime)
    else:
        totp = current_token(secret)
    return TokenResponse(token=totp)


@router.get("/check", dependencies=[Depends(rate_limit)])
def check_token(
    request: Request,
    secret: str,
    token: int,
    millisec: Optional[int] = None,
    unixtime: Optional[int] = None,
    window: int = 0,
    settings: Settings = Depends(get_settings),
):
    """200 if the token matches within the window, 401 otherwise."""
    if window > settings.check_max_window:
        raise InvalidArgument(f"window must be <= {settings.check_max_window}, got {window}")

    if millisec is not None:
        valid = validate(secret, token, millisec, window)
    elif unixtime is not None:
        valid = validate_seconds(secret, token, unixtime, window)
    else:
        valid = validate_now(secret, token, window)

    if not valid:
        logger.warning("failed: %s", request.url)
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    return Response(status_code=status.HTTP_200_OK)


@router.get("/image")
def get_image(
    label: str,
    secret: str,
    size: Optional[int] = None,
    settings: Settings = Depends(get_settings),
):
    """Enrollment QR code as a PNG."""
    url = build_url(label, secret)
    png = generate_qr_png(
        url,
        size if size is not None else settings.qr_default_size,
        max_size=settings.qr_max_size,
    )
    return Response(
        content=png,
        media_type="image/png",
        headers={"Cache-Control": "private,no-cache,no-store"},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around a settings object read once at startup."""
    settings = settings or Settings()

    app = FastAPI(
        title="RoadTOTP",
        description="Time-based One-Time Password Service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.check_limiter = RateLimiter(
        requests_per_minute=settings.check_requests_per_minute,
        requests_per_hour=settings.check_requests_per_hour,
        trust_forwarded=settings.trust_forwarded,
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        logger.warning("%d: %s", exc.status_code, request.url)
        message = exc.detail if isinstance(exc.detail, str) else "Error"
        return _error(exc.status_code, message, getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        logger.warning("400: %s", request.url)
        return _error(status.HTTP_400_BAD_REQUEST, "Bad Request")

    @app.exception_handler(InvalidSecretEncoding)
    @app.exception_handler(InvalidArgument)
    async def bad_request(request: Request, exc: Exception):
        logger.warning("400: %s (%s)", request.url, exc)
        return _error(status.HTTP_400_BAD_REQUEST, "Bad Request")

    app.include_router(router)
    return app


def cli():
    """CLI entry point."""
    import uvicorn

    settings = Settings()
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.timeout,
        log_level=level.lower(),
    )


if __name__ == "__main__":
    cli()
