"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
Supports three modes:
    - DEVELOPMENT: Uses the in-memory document store (no MongoDB needed, nothing persists)
    - STAGING: Uses a real MongoDB server (test database)
    - PRODUCTION: Uses a real MongoDB server (default)

The ENV_MODE variable controls which store implementation is instantiated,
so a plain run persists to MongoDB while tests and ENV_MODE=development
run against process memory without code changes.

Usage:
    from restaurant_orders.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # In-memory store
    else:
        # MongoDB

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
import sys
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentMode(str, Enum):
    """
    Application environment modes.

    Attributes:
        DEVELOPMENT: Local run against the in-memory store
        PRODUCTION: Live MongoDB server
        STAGING: MongoDB server holding throwaway data
    """
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.

    Attributes:
        env_mode: Current environment (development/production/staging)
        debug: Enable verbose logging

        # Store
        mongo_url: MongoDB connection string
        mongo_database: Database holding the menu and customer collections
        menu_collection: Collection name for menu items
        customers_collection: Collection name for customers
        mongo_timeout_ms: Server selection timeout

        # Ordering session
        currency_symbol: Prefix printed in front of every amount
        default_customer_name: Customer registered when none is given
        default_customer_phone: Phone for the default customer
        seed_menu: Insert the fixed menu at startup
        order_sentinel: Input that ends an ordering session
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    env_mode: EnvironmentMode = Field(
        default=EnvironmentMode.PRODUCTION,
        description="Application environment mode"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="Restaurant Ordering System",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # ==========================================================================
    # STORE (MONGODB)
    # ==========================================================================

    mongo_url: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection URL"
    )
    mongo_database: str = Field(
        default="restaurant",
        description="MongoDB database name"
    )
    menu_collection: str = Field(
        default="menu",
        description="Collection holding menu items"
    )
    customers_collection: str = Field(
        default="customers",
        description="Collection holding customers and their orders"
    )
    mongo_timeout_ms: int = Field(
        default=5000,
        ge=1,
        description="Server selection timeout in milliseconds"
    )

    # ==========================================================================
    # ORDERING SESSION
    # ==========================================================================

    currency_symbol: str = Field(
        default="Rs",
        description="Currency prefix for printed amounts"
    )
    default_customer_name: str = Field(
        default="Gadapa Raghavendra",
        description="Customer registered at startup"
    )
    default_customer_phone: str = Field(
        default="1234567890",
        description="Phone number of the startup customer"
    )
    seed_menu: bool = Field(
        default=True,
        description="Insert the fixed menu at startup (duplicates on re-run)"
    )
    order_sentinel: str = Field(
        default="done",
        min_length=1,
        description="Case-insensitive input that finishes an order"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("env_mode", mode="before")
    @classmethod
    def validate_env_mode(cls, v: str) -> EnvironmentMode:
        """Convert string to EnvironmentMode enum."""
        if isinstance(v, EnvironmentMode):
            return v
        try:
            return EnvironmentMode(v.lower())
        except ValueError:
            valid = [e.value for e in EnvironmentMode]
            raise ValueError(f"Invalid env_mode. Must be one of: {valid}")

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env_mode == EnvironmentMode.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env_mode == EnvironmentMode.PRODUCTION

    @property
    def use_real_store(self) -> bool:
        """Check if a real MongoDB server should be used."""
        return self.env_mode in (EnvironmentMode.PRODUCTION, EnvironmentMode.STAGING)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded only once per process; call
    ``get_settings.cache_clear()`` after changing the environment.

    Returns:
        Settings: Configured application settings

    Example:
        >>> settings = get_settings()
        >>> print(settings.env_mode)
        EnvironmentMode.DEVELOPMENT
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO, debug: bool = False) -> logging.Logger:
    """
    Configure application-wide logging.

    Log records go to stderr; stdout carries the ordering transcript.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        debug: Force DEBUG regardless of ``level``

    Returns:
        Configured package logger
    """
    settings = get_settings()

    if settings.debug or debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Reduce noise from the driver
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    return logging.getLogger("restaurant_orders")

