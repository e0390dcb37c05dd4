"""Application settings using Pydantic Settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Literal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Database Configuration
    mongo_uri: str = Field(
        "mongodb://127.0.0.1:27017/exercise-tracker",
        validation_alias=AliasChoices("MONGO_URI", "mongo_uri"),
    )
    store_backend: Literal["mongo", "memory"] = "mongo"
    
    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Server Configuration
    host: str = "0.0.0.0"
    port: int = Field(3000, validation_alias=AliasChoices("PORT", "port"))
    
    # CORS Configuration
    cors_origins: List[str] = ["*"]
    
    # Frontend assets
    views_dir: str = "views"
    static_dir: str = "public"

    @property
    def database_name(self) -> str:
        """Database name taken from the path of the connection string."""
        path = self.mongo_uri.split("://", 1)[-1]
        name = path.split("/", 1)[1] if "/" in path else ""
        name = name.split("?", 1)[0]
        return name or "exercise-tracker"


# Global settings instance
settings = Settings()
