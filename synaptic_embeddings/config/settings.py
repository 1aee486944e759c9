"""Configuration settings for Synaptic Embeddings."""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.embedding import ServiceConfig


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FILE: Optional[Path] = Field(
        default=None, description="Optional log file path"
    )

    # Embedding Configuration
    EMBEDDING_PROVIDER: str = Field(
        default="default", description="Embedding provider: 'default', 'openai' or 'ollama'"
    )
    EMBEDDING_MODEL: Optional[str] = Field(
        default=None, description="Embedding model name (provider default when unset)"
    )
    EMBEDDING_DIMENSIONS: Optional[int] = Field(
        default=None, gt=0, description="Declared embedding dimensions"
    )
    EMBEDDING_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("EMBEDDING_API_KEY", "OPENAI_API_KEY"),
        description="Credential for hosted embedding APIs",
    )
    EMBEDDING_API_ENDPOINT: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("EMBEDDING_API_ENDPOINT", "OLLAMA_API_ENDPOINT"),
        description="Embedding endpoint URL (e.g., http://localhost:11434/api/embeddings)",
    )
    EMBEDDING_REQUEST_TIMEOUT: float = Field(
        default=10.0, gt=0, description="Per-request timeout in seconds"
    )
    EMBEDDING_BATCH_CONCURRENCY: int = Field(
        default=1, ge=1, description="Maximum in-flight requests for batch embedding"
    )
    MOCK_EMBEDDINGS: bool = Field(
        default=False, description="Force the synthetic provider (no network access)"
    )

    def to_service_config(self) -> ServiceConfig:
        """Build the provider configuration described by these settings."""
        return ServiceConfig(
            provider=self.EMBEDDING_PROVIDER,
            model=self.EMBEDDING_MODEL,
            dimensions=self.EMBEDDING_DIMENSIONS,
            api_key=self.EMBEDDING_API_KEY,
            api_endpoint=self.EMBEDDING_API_ENDPOINT,
            timeout=self.EMBEDDING_REQUEST_TIMEOUT,
            batch_concurrency=self.EMBEDDING_BATCH_CONCURRENCY,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(exclude={"EMBEDDING_API_KEY"})

    def __repr__(self) -> str:
        """String representation of settings."""
        return (
            f"Settings(provider={self.EMBEDDING_PROVIDER}, "
            f"model={self.EMBEDDING_MODEL}, mock={self.MOCK_EMBEDDINGS})"
        )
