"""
Configuration Management for Milk Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Storage location, pricing defaults and export formatting are the only
knobs the ledger has, and they are all validated at startup.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Key-value storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MILK_LEDGER_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    backend: str = Field(
        default="file",
        pattern="^(file|memory)$",
        description="Storage backend: 'file' (JSON files on disk) or 'memory'"
    )
    data_dir: Path = Field(
        default=Path("~/.milk_ledger"),
        description="Directory holding one JSON file per collection"
    )
    key_namespace: str = Field(
        default="mera-doodh-hisab",
        min_length=1,
        description="Prefix for the collection keys"
    )
    write_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="How many times a failing file write is attempted"
    )

    @field_validator('data_dir')
    @classmethod
    def expand_data_dir(cls, v: Path) -> Path:
        return v.expanduser()

    @property
    def vendors_key(self) -> str:
        return f"{self.key_namespace}-vendors"

    @property
    def entries_key(self) -> str:
        return f"{self.key_namespace}-entries"

    @property
    def monthly_settings_key(self) -> str:
        return f"{self.key_namespace}-monthly-settings"


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MILK_LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Pre-fill values for a new entry when no monthly settings exist
    default_rate: float = Field(
        default=50.0,
        gt=0,
        description="Rate per liter suggested for new entries"
    )
    default_quantity: float = Field(
        default=1.0,
        gt=0,
        description="Quantity in liters suggested for new entries"
    )

    # Export formatting
    currency_symbol: str = Field(
        default="₹",
        description="Currency symbol used in CSV column headers"
    )
    csv_date_format: str = Field(
        default="%x",
        description="strftime format for the CSV date column (default: locale short date)"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum level for structured logs"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON lines (False: human readable console output)"
    )

    @field_validator('log_level', mode='before')
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.storage
        results["storage"] = True
    except Exception as e:
        results["storage"] = False
        results["storage_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except Exception as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
