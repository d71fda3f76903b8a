"""Application configuration via Pydantic Settings.

NOTE: We explicitly map .env variable names (STRICT_PLAN_TYPES, LOG_LEVEL,
etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Planning
    default_plan_type: str = Field(
        default="Plan de Desarrollo",
        validation_alias="DEFAULT_PLAN_TYPE",
    )
    # Reject unknown plan labels instead of falling back to the default plan
    strict_plan_types: bool = Field(default=False, validation_alias="STRICT_PLAN_TYPES")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    cors_origins: list[str] = Field(
        default=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        validation_alias="CORS_ORIGINS",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
