import math
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Coordinate:
    """Planar position with an optional elevation (NaN when absent)."""

    x: float
    y: float
    z: float = field(default=math.nan)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def has_z(self) -> bool:
        return not math.isnan(self.z)

    def with_xy(self, x: float, y: float) -> "Coordinate":
        return replace(self, x=x, y=y)
