"""Application settings loaded from environment variables / .env file."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _strip_str(v: str | object) -> str | object:
    """Strip whitespace from string env values (common .env copy-paste issue)."""
    return v.strip() if isinstance(v, str) else v


class Settings(BaseSettings):
    """Chantier configuration.

    Values are loaded from environment variables and/or an ``.env`` file
    located at the project root.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Step catalog ──────────────────────────────────────────────────
    step_catalog_path: str = Field(
        default="",
        description=(
            "Path to a JSON construction-step catalog. When empty, the "
            "built-in residential catalog is used."
        ),
    )

    @field_validator("step_catalog_path", mode="before")
    @classmethod
    def strip_catalog_path(cls, v: str | object) -> str | object:
        return _strip_str(v)

    # ── HTTP API ──────────────────────────────────────────────────────
    api_host: str = Field(
        default="0.0.0.0",
        description="Interface the budget API server binds to.",
    )
    api_port: int = Field(
        default=8787,
        description="Port for the budget API server.",
    )

    # ── General ───────────────────────────────────────────────────────
    debug: bool = Field(
        default=False,
        description="Enable debug logging.",
    )


settings = Settings()
