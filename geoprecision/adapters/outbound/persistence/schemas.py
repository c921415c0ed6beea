import math
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from geoprecision.domain.values import ModelKind, PrecisionModel


class PrecisionModelSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ModelKind = Field(
        default=ModelKind.FLOATING,
        description="Precision regime.",
        examples=["FIXED", "FLOATING", "FLOATING SINGLE"],
    )
    scale: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Scale factor of a fixed model.",
        examples=[1000.0],
    )
    grid_size: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Explicit grid size of a fixed model, 0 if derived from the scale.",
        examples=[0.001],
    )

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: Union[str, ModelKind]) -> ModelKind:
        return ModelKind.from_name(v)

    @model_validator(mode="after")
    def validate_grid(self) -> "PrecisionModelSchema":
        if self.kind is ModelKind.FIXED:
            if self.scale == 0 and self.grid_size == 0:
                raise ValueError("FIXED models need a positive scale or grid size")
            if self.grid_size != 0 and not math.isfinite(1.0 / self.grid_size):
                raise ValueError(f"Grid size is too small: {self.grid_size}")
        elif self.scale != 0 or self.grid_size != 0:
            raise ValueError(
                f"{self.kind} models do not carry a scale or grid size: "
                f"scale={self.scale}, grid_size={self.grid_size}"
            )
        return self

    @classmethod
    def from_domain(cls, model: PrecisionModel) -> "PrecisionModelSchema":
        return cls(
            kind=model.kind,
            scale=model.scale,
            grid_size=model.explicit_grid_size,
        )

    def to_domain(self) -> PrecisionModel:
        return PrecisionModel(
            kind=self.kind,
            scale=self.scale,
            explicit_grid_size=self.grid_size,
        )
