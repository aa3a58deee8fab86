"""Security headers middleware: configurable browser-security response headers.

Headers (when non-empty):
- X-XSS-Protection, X-Content-Type-Options, X-Frame-Options
- Cross-Origin-Embedder/Opener/Resource-Policy, Origin-Agent-Cluster
- Referrer-Policy, X-DNS-Prefetch-Control, X-Download-Options
- X-Permitted-Cross-Domain-Policies
- Strict-Transport-Security (https only, max-age > 0)
- Content-Security-Policy or Content-Security-Policy-Report-Only
- Permissions-Policy
"""
from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from helmet.config import HelmetConfig, resolve_config

logger = logging.getLogger(__name__)

_SECURE_SCHEMES = ("https",)

# (header, config field) in emission order
_SIMPLE_HEADERS = (
    ("X-XSS-Protection", "xss_protection"),
    ("X-Content-Type-Options", "content_type_nosniff"),
    ("X-Frame-Options", "x_frame_options"),
    ("Cross-Origin-Embedder-Policy", "cross_origin_embedder_policy"),
    ("Cross-Origin-Opener-Policy", "cross_origin_opener_policy"),
    ("Cross-Origin-Resource-Policy", "cross_origin_resource_policy"),
    ("Origin-Agent-Cluster", "origin_agent_cluster"),
    ("Referrer-Policy", "referrer_policy"),
    ("X-DNS-Prefetch-Control", "x_dns_prefetch_control"),
    ("X-Download-Options", "x_download_options"),
    ("X-Permitted-Cross-Domain-Policies", "x_permitted_cross_domain"),
)


def build_hsts_value(config: HelmetConfig) -> str:
    """``max-age=<n>[; includeSubDomains][; preload]``"""
    value = f"max-age={config.hsts_max_age}"
    if not config.hsts_exclude_subdomains:
        value += "; includeSubDomains"
    if config.hsts_preload_enabled:
        value += "; preload"
    return value


def compute_security_headers(config: HelmetConfig, secure: bool) -> dict[str, str]:
    """Headers to set for one exchange. Pure: reads config, never changes it."""
    headers: dict[str, str] = {}

    for name, attr in _SIMPLE_HEADERS:
        value = getattr(config, attr)
        if value:
            headers[name] = value

    if secure and config.hsts_max_age != 0:
        headers["Strict-Transport-Security"] = build_hsts_value(config)

    if config.content_security_policy:
        if config.csp_report_only:
            headers["Content-Security-Policy-Report-Only"] = config.content_security_policy
        else:
            headers["Content-Security-Policy"] = config.content_security_policy

    if config.permission_policy:
        headers["Permissions-Policy"] = config.permission_policy

    return headers


def is_secure_transport(request: Request) -> bool:
    """True when the exchange arrived over TLS.

    Relies on the server to rewrite the scheme behind a proxy
    (e.g. ``uvicorn --proxy-headers``).
    """
    return request.url.scheme in _SECURE_SCHEMES


def resolve_security_headers(request: Request, config: HelmetConfig) -> Optional[dict[str, str]]:
    """Headers for this request, or None when the filter skips it."""
    if config.filter is not None and config.filter(request):
        logger.debug("Security headers skipped for %s", request.url.path, extra={"path": request.url.path})
        return None
    return compute_security_headers(config, is_secure_transport(request))


def merge_security_headers(headers: MutableMapping[str, str], computed: dict[str, str]) -> None:
    """Add ``computed`` to ``headers``. A header the route already set is kept."""
    for name, value in computed.items():
        if name not in headers:
            headers[name] = value


def apply_security_headers(
    request: Request, headers: MutableMapping[str, str], config: HelmetConfig
) -> bool:
    """Set security headers on ``headers``. Returns False if the filter skipped it."""
    computed = resolve_security_headers(request, config)
    if computed is None:
        return False
    merge_security_headers(headers, computed)
    return True


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add configurable security headers to every response.

    The config is resolved once here and shared read-only by all requests.
    Headers already present on the route's response are left as they are.
    """

    def __init__(self, app: ASGIApp, config: Optional[HelmetConfig] = None) -> None:
        super().__init__(app)
        self.config = resolve_config(config)
        logger.debug("Security headers configured: %s", self.config.as_dict())

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        # Decided before the route runs; the route's own headers take precedence
        computed = resolve_security_headers(request, self.config)
        response = await call_next(request)
        if computed is not None:
            merge_security_headers(response.headers, computed)
        return response


def security_headers(config: Optional[HelmetConfig] = None) -> Middleware:
    """Pipeline stage for ``Starlette(middleware=[...])`` / ``FastAPI(middleware=[...])``."""
    return Middleware(SecurityHeadersMiddleware, config=config)
