"""
config.py — Flask configuration classes for the analysis intake service.
"""
import os
import secrets

from intake.versions import CLI_VERSION_HEADER, LEGACY_VERSIONS


def _legacy_versions():
    raw = os.environ.get("LEGACY_CLI_VERSIONS", "")
    if not raw:
        return LEGACY_VERSIONS
    return tuple(v.strip() for v in raw.split(",") if v.strip())


class BaseConfig:
    """Base configuration shared by all environments."""
    SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)
    MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", 10))
    MAX_CONTENT_LENGTH = MAX_UPLOAD_MB * 1024 * 1024  # bytes

    # Header the CLI uses to announce its release, and releases still on the v1 body
    CLI_VERSION_HEADER = os.environ.get("CLI_VERSION_HEADER", CLI_VERSION_HEADER)
    LEGACY_CLI_VERSIONS = _legacy_versions()

    RATE_LIMIT = os.environ.get("RATE_LIMIT", "60 per minute")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    VERSION = "1.0.0"


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    TESTING = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    TESTING = False


class TestingConfig(BaseConfig):
    DEBUG = True
    TESTING = True
    RATELIMIT_ENABLED = False
    MAX_CONTENT_LENGTH = 64 * 1024


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
