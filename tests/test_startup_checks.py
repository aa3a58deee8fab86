"""Tests for startup configuration warnings."""
import logging

from helmet.config import HelmetConfig
from helmet.startup_checks import validate_settings


def test_default_config_passes(caplog):
    with caplog.at_level(logging.INFO):
        assert validate_settings(HelmetConfig()) == []
    assert "Security header settings OK" in caplog.text


def test_report_only_without_csp(caplog):
    warnings = validate_settings(HelmetConfig(csp_report_only=True))
    assert len(warnings) == 1
    assert "HELMET_CSP" in warnings[0]
    assert "HELMET_CSP_REPORT_ONLY" in caplog.text


def test_hsts_flags_without_max_age():
    warnings = validate_settings(HelmetConfig(hsts_preload_enabled=True))
    assert warnings == ["HSTS flags are set but HELMET_HSTS_MAX_AGE is 0, HSTS is disabled"]


def test_negative_max_age():
    warnings = validate_settings(HelmetConfig(hsts_max_age=-1))
    assert warnings == ["HELMET_HSTS_MAX_AGE is negative (-1)"]


def test_valid_hsts_config():
    config = HelmetConfig(hsts_max_age=31536000, hsts_preload_enabled=True, content_security_policy="default-src 'self'", csp_report_only=True)
    assert validate_settings(config) == []
