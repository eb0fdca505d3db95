"""
RoadTOTP Configuration
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from TOTP_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="TOTP_", env_file=".env", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    timeout: int = 2  # seconds before an idle connection is closed
    debug: bool = False
    log_level: str = "INFO"

    # QR images
    qr_default_size: int = 128
    qr_max_size: int = 1024

    # /check
    check_max_window: int = 10  # widest clock-skew window accepted
    check_requests_per_minute: int = 30  # per client, 0 disables
    check_requests_per_hour: int = 600  # per client, 0 disables
    trust_forwarded: bool = False  # key clients by X-Forwarded-For / X-Real-IP
