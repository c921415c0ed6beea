import math
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from geoprecision.domain.values import ModelKind, PrecisionModel


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    DEFAULT_MODEL_KIND: ModelKind = Field(
        default=ModelKind.FLOATING,
        description="Precision regime used when none is given explicitly",
        examples=["FIXED", "FLOATING", "FLOATING SINGLE"],
    )

    DEFAULT_SCALE: float = Field(
        default=1.0,
        description="Scale of the default model when it is FIXED; "
        "a negative value is taken as the grid size",
        examples=[1000.0, -0.001],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("DEFAULT_MODEL_KIND", mode="before")
    @classmethod
    def validate_model_kind(cls, value) -> ModelKind:
        return ModelKind.from_name(value)

    @model_validator(mode="after")
    def validate_fixed_scale(self) -> "Settings":
        if self.DEFAULT_MODEL_KIND is ModelKind.FIXED and (
            self.DEFAULT_SCALE == 0 or not math.isfinite(self.DEFAULT_SCALE)
        ):
            raise ValueError(
                f"DEFAULT_SCALE ({self.DEFAULT_SCALE}) must be finite and non-zero "
                f"for a FIXED DEFAULT_MODEL_KIND"
            )
        return self

    def default_precision_model(self) -> PrecisionModel:
        if self.DEFAULT_MODEL_KIND is ModelKind.FIXED:
            return PrecisionModel.fixed(self.DEFAULT_SCALE)

        return PrecisionModel.of_kind(self.DEFAULT_MODEL_KIND)


@lru_cache()
def get_settings() -> Settings:
    from geoprecision.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.info("settings_loaded", default_model_kind=str(settings.DEFAULT_MODEL_KIND))
        return settings

    except Exception as e:
        logger.error("settings_load_failed", error=str(e), exc_info=True)
        raise
