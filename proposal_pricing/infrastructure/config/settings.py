"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    financing_plan_repository: str = "in_memory"  # in_memory or postgres
    database_url: str = ""  # Required when financing_plan_repository=postgres
    default_addon_term_months: int = 60
    seed_default_plans: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
