"""Application settings using Pydantic Settings for type-safe configuration."""

from enum import Enum
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


IN_MEMORY_DATASOURCE = "memory://"


class SchemaUpdateMode(str, Enum):
    """What to do with the database schema at startup."""
    NONE = "none"
    UPDATE = "update"
    RECREATE = "recreate"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    All settings are type-safe and validated by Pydantic.
    """
    
    # Application
    app_name: str = "Employee Directory API"
    app_version: str = "1.0.0"
    debug: bool = False
    active_profile: str = "development"
    
    # API
    api_prefix: str = ""
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    
    # Datasource
    datasource_url: str = IN_MEMORY_DATASOURCE
    schema_update_mode: SchemaUpdateMode = SchemaUpdateMode.NONE
    database_echo: bool = False
    database_timeout_seconds: float = 5.0
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "json"
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    @property
    def uses_in_memory_store(self) -> bool:
        """Check if entities live only for the process lifetime."""
        return self.datasource_url == IN_MEMORY_DATASOURCE
    
    @property
    def is_production(self) -> bool:
        """Check if running with the production profile."""
        return self.active_profile.lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Returns:
        Singleton Settings instance
    """
    return Settings()
