"""Environment-backed settings for the security headers middleware and example app."""
from __future__ import annotations

import os
from dotenv import load_dotenv

load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUE_VALUES


class Settings:
    """Reads the environment each time it is instantiated."""

    def __init__(self):
        # API
        self.API_HOST = os.getenv("API_HOST", "0.0.0.0")
        self.API_PORT = int(os.getenv("API_PORT", "8000"))

        # CORS origins (comma-separated, or * for dev)
        self.CORS_ORIGINS = [
            o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")
        ]

        # Security headers. Empty means "use the built-in default".
        self.HELMET_XSS_PROTECTION = os.getenv("HELMET_XSS_PROTECTION", "")
        self.HELMET_CONTENT_TYPE_NOSNIFF = os.getenv("HELMET_CONTENT_TYPE_NOSNIFF", "")
        self.HELMET_X_FRAME_OPTIONS = os.getenv("HELMET_X_FRAME_OPTIONS", "")
        self.HELMET_REFERRER_POLICY = os.getenv("HELMET_REFERRER_POLICY", "")
        self.HELMET_COEP = os.getenv("HELMET_COEP", "")
        self.HELMET_COOP = os.getenv("HELMET_COOP", "")
        self.HELMET_CORP = os.getenv("HELMET_CORP", "")
        self.HELMET_ORIGIN_AGENT_CLUSTER = os.getenv("HELMET_ORIGIN_AGENT_CLUSTER", "")
        self.HELMET_DNS_PREFETCH_CONTROL = os.getenv("HELMET_DNS_PREFETCH_CONTROL", "")
        self.HELMET_DOWNLOAD_OPTIONS = os.getenv("HELMET_DOWNLOAD_OPTIONS", "")
        self.HELMET_PERMITTED_CROSS_DOMAIN = os.getenv("HELMET_PERMITTED_CROSS_DOMAIN", "")

        # No built-in default: only sent when set
        self.HELMET_CSP = os.getenv("HELMET_CSP", "")
        self.HELMET_CSP_REPORT_ONLY = _env_bool("HELMET_CSP_REPORT_ONLY")
        self.HELMET_PERMISSIONS_POLICY = os.getenv("HELMET_PERMISSIONS_POLICY", "")

        # HSTS (only sent over https, and only when max-age is non-zero)
        self.HELMET_HSTS_MAX_AGE = int(os.getenv("HELMET_HSTS_MAX_AGE", "0"))
        self.HELMET_HSTS_EXCLUDE_SUBDOMAINS = _env_bool("HELMET_HSTS_EXCLUDE_SUBDOMAINS")
        self.HELMET_HSTS_PRELOAD_ENABLED = _env_bool("HELMET_HSTS_PRELOAD_ENABLED")

        # Paths that never get security headers (comma-separated)
        self.HELMET_SKIP_PATHS = [
            p.strip() for p in os.getenv("HELMET_SKIP_PATHS", "").split(",") if p.strip()
        ]

        # Logging
        self.LOG_FORMAT = os.getenv("LOG_FORMAT", "text")  # "text" or "json"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
