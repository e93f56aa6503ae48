"""
Configuration management using Pydantic settings.
Handles the database URL, result limits and logging options through environment variables.
"""

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Data access settings with environment variable support."""
    
    # Application configuration
    app_name: str = "LightBnB"
    environment: str = "development"
    debug: bool = False
    
    # Individual database components for flexibility
    postgres_db: str = "lightbnb"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    
    # Full URL wins over the components when provided
    database_url: Optional[str] = None
    
    # Test database configuration
    test_postgres_db: str = "lightbnb_test"
    test_postgres_user: str = "postgres"
    test_postgres_password: str = "postgres"
    test_postgres_host: str = "localhost"
    test_postgres_port: int = 5432
    test_database_url: Optional[str] = None
    
    # Query defaults
    default_result_limit: int = 10
    
    # Logging
    log_level: str = "INFO"
    slow_query_threshold: float = 1.0  # seconds
    
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v
    
    @field_validator("default_result_limit")
    @classmethod
    def validate_default_result_limit(cls, v):
        if v < 1:
            raise ValueError("default_result_limit must be a positive integer")
        return v
    
    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper()
    
    @model_validator(mode="after")
    def assemble_database_url(self) -> "Settings":
        """Build database URLs from components if not provided directly."""
        if not self.database_url:
            self.database_url = (
                f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
                f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
            )
        elif self.database_url.startswith("postgresql://"):
            # Ensure async driver is used
            self.database_url = self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        
        if not self.test_database_url:
            self.test_database_url = (
                f"postgresql+asyncpg://{self.test_postgres_user}:{self.test_postgres_password}"
                f"@{self.test_postgres_host}:{self.test_postgres_port}/{self.test_postgres_db}"
            )
        elif self.test_database_url.startswith("postgresql://"):
            self.test_database_url = self.test_database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return self
    
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"
    
    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == "testing"
    
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"
    
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one instance of settings throughout the process lifecycle.
    """
    return Settings()


# Global settings instance
settings = get_settings()
