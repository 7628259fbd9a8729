# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads every setting from environment variables
# (or a .env file) and hands them to the rest of the Garden Planner app.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-settings based configuration with environment loading, validation
# and typed access for application, database, pagination, weather, OpenAI and
# Unsplash parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - app.shared.infrastructure.database (engine configuration)
# - External API clients (weather, OpenAI, Unsplash)
# - Weather hazard and advice rules (thresholds)

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Settings are read from the process environment with a fallback to the
    .env file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Garden Planner API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Garden planning, plant library and care backend",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=False, description="Auto-reload on changes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: Optional[str] = Field(None, description="Full async database URL")
    DB_HOST: str = Field(default="localhost", description="Database host")
    DB_PORT: int = Field(default=5432, description="Database port")
    DB_NAME: str = Field(default="garden_planner", description="Database name")
    DB_USER: str = Field(default="postgres", description="Database user")
    DB_PASSWORD: str = Field(default="", description="Database password")

    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Database pool timeout")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")

    # =========================================================================
    # HTTP SETTINGS
    # =========================================================================

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    MAX_PAGE_SIZE: int = Field(default=100, description="Largest page size a caller may request")

    # =========================================================================
    # EXTERNAL API CLIENTS
    # =========================================================================

    EXTERNAL_API_TIMEOUT: int = Field(default=10, description="External API timeout (seconds)")
    EXTERNAL_API_MAX_RETRIES: int = Field(default=3, description="External API retry attempts")

    # World Weather Online
    WEATHER_API_KEY: Optional[str] = Field(None, description="World Weather Online API key")
    WEATHER_API_URL: str = Field(
        default="https://api.worldweatheronline.com/premium/v1",
        description="World Weather Online API URL"
    )

    # OpenAI
    OPENAI_API_KEY: Optional[str] = Field(None, description="OpenAI API key")
    OPENAI_API_URL: str = Field(default="https://api.openai.com/v1", description="OpenAI API URL")
    OPENAI_MODEL: str = Field(default="gpt-4o-mini", description="OpenAI model")
    OPENAI_MAX_TOKENS: int = Field(default=2000, description="OpenAI max tokens")
    OPENAI_TEMPERATURE: float = Field(default=0.7, description="OpenAI sampling temperature")

    # Unsplash
    UNSPLASH_ACCESS_KEY: Optional[str] = Field(None, description="Unsplash access key")
    UNSPLASH_API_URL: str = Field(default="https://api.unsplash.com", description="Unsplash API URL")

    # Perenual plant data
    PLANT_API_KEY: Optional[str] = Field(None, description="Perenual plant data API key")
    PLANT_API_URL: str = Field(default="https://perenual.com/api", description="Perenual plant data API URL")

    # =========================================================================
    # WEATHER THRESHOLDS
    # =========================================================================

    GARDEN_WEATHER_FORECAST_DAYS: int = Field(default=3, description="Days in garden forecast")

    # Plant hazard rules
    HEAT_STRESS_TEMPERATURE: float = Field(default=28.0, description="Heat stress above (°C)")
    FROST_RISK_TEMPERATURE: float = Field(default=5.0, description="Frost risk below (°C)")
    HIGH_HUMIDITY: float = Field(default=85.0, description="Fungal risk humidity (%)")
    HIGH_UV_INDEX: float = Field(default=7.0, description="Leaf scorch UV index")
    STRONG_WIND_SPEED: float = Field(default=20.0, description="Damaging wind speed (km/h)")
    HEAVY_RAIN_PRECIPITATION: float = Field(default=15.0, description="Heavy rain (mm)")

    # Gardening advice
    HIGH_HUMIDITY_ADVICE: float = Field(default=80.0, description="Humidity advice threshold")
    HIGH_TEMPERATURE_ADVICE: float = Field(default=30.0, description="Temperature advice threshold")
    HEAVY_RAIN_ADVICE: float = Field(default=10.0, description="Rain advice threshold")

    # Category tips
    COLD_TEMPERATURE: float = Field(default=15.0, description="Cold stress below (°C)")
    IDEAL_TEMPERATURE_MAX: float = Field(default=32.0, description="Ideal growth up to (°C)")
    HIGH_HEAT_TEMPERATURE: float = Field(default=36.0, description="High heat up to (°C)")
    VERY_DRY_HUMIDITY: float = Field(default=30.0, description="Very dry below (%)")
    COMFORTABLE_HUMIDITY_MAX: float = Field(default=70.0, description="Comfortable up to (%)")
    LOW_UV_INDEX: float = Field(default=2.0, description="Low UV up to")
    MODERATE_UV_INDEX: float = Field(default=5.0, description="Moderate UV up to")

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def database_url(self) -> str:
        """Get the database URL, preferring explicit DATABASE_URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache so settings are loaded once and reused for the
    application lifetime. The environment must be set before first use.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
