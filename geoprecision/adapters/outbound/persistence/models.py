import math
from dataclasses import dataclass

from geoprecision.domain.values import ModelKind


@dataclass(frozen=True)
class PrecisionModelRecord:
    """Flat, storage-friendly form of a precision model."""

    kind: str
    scale: float
    grid_size: float

    def __post_init__(self):
        if not self.kind:
            raise ValueError("Kind cannot be empty")

        if not (math.isfinite(self.scale) and math.isfinite(self.grid_size)):
            raise ValueError(
                f"Scale and grid size must be finite: {self.scale}, {self.grid_size}"
            )

        if self.scale < 0 or self.grid_size < 0:
            raise ValueError(
                f"Scale and grid size cannot be negative: {self.scale}, {self.grid_size}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "PrecisionModelRecord":
        try:
            kind = ModelKind.from_name(data["kind"])
            scale = float(data.get("scale", 0.0))
            grid_size = float(data.get("grid_size", 0.0))

            return cls(kind=kind.value, scale=scale, grid_size=grid_size)

        except KeyError as e:
            raise ValueError(f"Missing required field in precision model record: {e}") from e
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid precision model record: {e}") from e

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "scale": self.scale,
            "grid_size": self.grid_size,
        }

    def __str__(self) -> str:
        return f"{self.kind}: scale={self.scale}, grid_size={self.grid_size}"
