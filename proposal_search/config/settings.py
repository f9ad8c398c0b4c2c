"""Application settings and configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings

DEFAULT_CORPUS_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Proposal Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    
    # Corpus
    corpus_dir: Path = Field(default=DEFAULT_CORPUS_DIR)
    corpus_pattern: str = Field(default="*.md")
    
    # Search Configuration
    fuzzy_threshold: float = Field(default=0.15, ge=0.0, le=1.0)
    min_match_char_length: int = Field(default=2, ge=1)
    max_query_length: int = Field(default=200)
    
    # Cross-match: batches above this size are logged as slow, never refused
    max_cross_match_terms: int = Field(default=50)
    
    # Metadata listing
    page_size: int = Field(default=50, ge=1)
    
    # Logging
    log_level: str = Field(default="INFO")
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]
    )
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
