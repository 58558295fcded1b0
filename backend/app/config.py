from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:8000",
    ]

    cors_origin_regex: str | None = None
    trusted_hosts: list[str] = ["*"]
    root_path: str = ""

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Storage
    storage_backend: Literal["supabase", "memory"] = "supabase"
    supabase_url: str = ""
    supabase_key: str = ""

    # Mutation behaviour
    cascade_deletes: bool = False  # Remove dependent notes / tag references on delete
    strict_mutations: bool = True  # Surface NotFound/Storage errors instead of resolving to null


settings = Settings()
