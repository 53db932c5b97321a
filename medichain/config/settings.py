"""
Configuration settings for MediChain.

This module provides configuration management for the medicine ledger chaincode
and its local runtime. Values come from environment variables with defaults
suited to development; environment-specific subclasses are selected through
MEDICHAIN_ENV.
"""

import os
from typing import Any


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Framework configuration settings"""

    FRAMEWORK_NAME = "medichain"

    # Contract settings
    ALLOW_OVERWRITE = _env_flag("MEDICHAIN_ALLOW_OVERWRITE", True)
    STRICT_DECODE = _env_flag("MEDICHAIN_STRICT_DECODE", True)
    SEED_FILE = os.getenv("MEDICHAIN_SEED_FILE")  # None means built-in seed records
    SEED_KEY_PREFIX = os.getenv("MEDICHAIN_SEED_KEY_PREFIX", "MEDICINE")

    # Storage settings
    DEFAULT_STORAGE_BACKEND = os.getenv("MEDICHAIN_STORAGE_BACKEND", "sqlite")  # memory, sqlite
    DATABASE_PATH = os.getenv("MEDICHAIN_DB_PATH", "medichain.db")

    # Logging settings
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def get_contract_config(cls) -> dict[str, Any]:
        """Get contract configuration"""
        return {
            "allow_overwrite": cls.ALLOW_OVERWRITE,
            "strict_decode": cls.STRICT_DECODE,
            "seed_file": cls.SEED_FILE,
            "seed_key_prefix": cls.SEED_KEY_PREFIX
        }

    @classmethod
    def get_storage_config(cls) -> dict[str, Any]:
        """Get storage configuration"""
        return {
            "backend": cls.DEFAULT_STORAGE_BACKEND,
            "database_path": cls.DATABASE_PATH
        }

    @classmethod
    def validate_config(cls) -> list[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if cls.DEFAULT_STORAGE_BACKEND not in ["memory", "sqlite"]:
            errors.append("DEFAULT_STORAGE_BACKEND must be one of: memory, sqlite")

        if cls.DEFAULT_STORAGE_BACKEND == "sqlite" and not cls.DATABASE_PATH:
            errors.append("DATABASE_PATH is required for the sqlite backend")

        if not cls.SEED_KEY_PREFIX:
            errors.append("SEED_KEY_PREFIX must not be empty")

        if cls.SEED_FILE and not os.path.isfile(cls.SEED_FILE):
            errors.append(f"SEED_FILE not found: {cls.SEED_FILE}")

        if cls.LOG_LEVEL.upper() not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            errors.append("LOG_LEVEL must be a standard logging level name")

        return errors


# Environment-specific settings
class DevelopmentSettings(Settings):
    """Development environment settings"""
    LOG_LEVEL = "DEBUG"


class ProductionSettings(Settings):
    """Production environment settings"""
    LOG_LEVEL = "WARNING"
    DEFAULT_STORAGE_BACKEND = "sqlite"


class TestingSettings(Settings):
    """Testing environment settings"""
    LOG_LEVEL = "DEBUG"
    DEFAULT_STORAGE_BACKEND = "memory"


# Get settings based on environment
def get_settings(env: str | None = None) -> Settings:
    """Get settings for env, defaulting to the MEDICHAIN_ENV environment variable"""
    env = (env or os.getenv("MEDICHAIN_ENV", "development")).lower()

    if env == "production":
        return ProductionSettings()
    elif env == "testing":
        return TestingSettings()
    else:
        return DevelopmentSettings()
