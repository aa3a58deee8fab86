"""Security headers configuration: resolved once, read-only afterwards.

Every string field left unset (``None`` or ``""``) falls back to the value in
``DEFAULTS``. Content-Security-Policy and Permissions-Policy have no default:
they are only sent when the caller provides a value.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from starlette.requests import Request

if TYPE_CHECKING:
    from helmet.settings import Settings

RequestFilter = Callable[[Request], bool]

# Field names and values are part of the public contract
DEFAULTS: dict[str, str] = {
    "xss_protection": "0",
    "content_type_nosniff": "nosniff",
    "x_frame_options": "SAMEORIGIN",
    "referrer_policy": "no-referrer",
    "cross_origin_embedder_policy": "require-corp",
    "cross_origin_opener_policy": "same-origin",
    "cross_origin_resource_policy": "same-origin",
    "origin_agent_cluster": "?1",
    "x_dns_prefetch_control": "off",
    "x_download_options": "noopen",
    "x_permitted_cross_domain": "none",
}

_NO_DEFAULT = ("content_security_policy", "permission_policy")
_FLAGS = ("hsts_exclude_subdomains", "csp_report_only", "hsts_preload_enabled")


@dataclass(frozen=True)
class HelmetConfig:
    """Configuration for :class:`~helmet.middleware.security_headers.SecurityHeadersMiddleware`.

    ``filter`` skips the middleware for a request when it returns True.
    ``hsts_max_age`` of 0 disables Strict-Transport-Security entirely.
    """

    filter: Optional[RequestFilter] = None
    xss_protection: Optional[str] = None
    content_type_nosniff: Optional[str] = None
    x_frame_options: Optional[str] = None  # "SAMEORIGIN", "DENY", "ALLOW-FROM uri"
    hsts_max_age: Optional[int] = 0
    hsts_exclude_subdomains: Optional[bool] = False
    content_security_policy: Optional[str] = ""
    csp_report_only: Optional[bool] = False
    hsts_preload_enabled: Optional[bool] = False
    referrer_policy: Optional[str] = None
    permission_policy: Optional[str] = ""
    cross_origin_embedder_policy: Optional[str] = None
    cross_origin_opener_policy: Optional[str] = None
    cross_origin_resource_policy: Optional[str] = None
    origin_agent_cluster: Optional[str] = None
    x_dns_prefetch_control: Optional[str] = None
    x_download_options: Optional[str] = None
    x_permitted_cross_domain: Optional[str] = None

    def __post_init__(self):
        # frozen=True: go through object.__setattr__ while resolving
        for name, default in DEFAULTS.items():
            if not getattr(self, name):
                object.__setattr__(self, name, default)
        for name in _NO_DEFAULT:
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")
        for name in _FLAGS:
            object.__setattr__(self, name, bool(getattr(self, name)))
        if self.hsts_max_age is None:
            object.__setattr__(self, "hsts_max_age", 0)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> HelmetConfig:
        """Build a config from the environment-backed app settings."""
        if settings is None:
            from helmet.settings import Settings

            settings = Settings()

        return cls(
            filter=skip_paths_filter(settings.HELMET_SKIP_PATHS) if settings.HELMET_SKIP_PATHS else None,
            xss_protection=settings.HELMET_XSS_PROTECTION,
            content_type_nosniff=settings.HELMET_CONTENT_TYPE_NOSNIFF,
            x_frame_options=settings.HELMET_X_FRAME_OPTIONS,
            hsts_max_age=settings.HELMET_HSTS_MAX_AGE,
            hsts_exclude_subdomains=settings.HELMET_HSTS_EXCLUDE_SUBDOMAINS,
            content_security_policy=settings.HELMET_CSP,
            csp_report_only=settings.HELMET_CSP_REPORT_ONLY,
            hsts_preload_enabled=settings.HELMET_HSTS_PRELOAD_ENABLED,
            referrer_policy=settings.HELMET_REFERRER_POLICY,
            permission_policy=settings.HELMET_PERMISSIONS_POLICY,
            cross_origin_embedder_policy=settings.HELMET_COEP,
            cross_origin_opener_policy=settings.HELMET_COOP,
            cross_origin_resource_policy=settings.HELMET_CORP,
            origin_agent_cluster=settings.HELMET_ORIGIN_AGENT_CLUSTER,
            x_dns_prefetch_control=settings.HELMET_DNS_PREFETCH_CONTROL,
            x_download_options=settings.HELMET_DOWNLOAD_OPTIONS,
            x_permitted_cross_domain=settings.HELMET_PERMITTED_CROSS_DOMAIN,
        )

    def as_dict(self) -> dict:
        """Resolved values without the filter callable (for logging)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "filter"}


def resolve_config(config: Optional[HelmetConfig] = None) -> HelmetConfig:
    """Return ``config`` or the all-defaults config when none is given."""
    return config if config is not None else HelmetConfig()


def skip_paths_filter(paths: Iterable[str]) -> RequestFilter:
    """Filter that matches requests whose path is exactly one of ``paths``."""
    skip = frozenset(paths)

    def _filter(request: Request) -> bool:
        return request.url.path in skip

    return _filter
