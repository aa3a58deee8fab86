"""Startup validation: flag header settings that would silently do nothing."""
from __future__ import annotations

import logging

from helmet.config import HelmetConfig

logger = logging.getLogger(__name__)


def validate_settings(config: HelmetConfig) -> list[str]:
    """Check a resolved config. Returns list of warnings (empty = all good).

    Header values themselves are passed through unchecked.
    """
    warnings: list[str] = []

    if config.csp_report_only and not config.content_security_policy:
        warnings.append("HELMET_CSP_REPORT_ONLY is set but HELMET_CSP is empty, no CSP header will be sent")

    if config.hsts_max_age == 0 and (config.hsts_preload_enabled or config.hsts_exclude_subdomains):
        warnings.append("HSTS flags are set but HELMET_HSTS_MAX_AGE is 0, HSTS is disabled")

    if config.hsts_max_age < 0:
        warnings.append(f"HELMET_HSTS_MAX_AGE is negative ({config.hsts_max_age})")

    for w in warnings:
        logger.warning("%s", w)

    if not warnings:
        logger.info("Security header settings OK")

    return warnings
