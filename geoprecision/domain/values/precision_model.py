import math
from dataclasses import dataclass, replace
from typing import Any, ClassVar, Union

from geoprecision.domain.exceptions import InvalidScaleError
from geoprecision.domain.services.arithmetic import (
    double_bits,
    round_half_away_from_zero,
    to_single_precision,
)

from .coordinate import Coordinate
from .model_kind import ModelKind

# Largest magnitude at which every integer is still exactly representable
# in a double.
MAXIMUM_PRECISE_VALUE = 9007199254740992.0


@dataclass(frozen=True, eq=False)
class PrecisionModel:
    """
    The grid of legal coordinate positions a geometry engine may produce.

    A FIXED model snaps ordinates to a grid defined either by a scale
    (``round(v * scale) / scale``) or by an explicit grid size
    (``round(v / grid) * grid``). FLOATING leaves values untouched and
    FLOATING_SINGLE reduces them to single-precision granularity.

    Use the classmethods (``fixed``, ``of_kind``, ``copy_of``) rather than
    filling the fields by hand: ``explicit_grid_size`` is only non-zero when
    the model was built from a grid size, and the scale is then derived
    from it.
    """

    MAXIMUM_PRECISE_VALUE: ClassVar[float] = MAXIMUM_PRECISE_VALUE

    kind: ModelKind = ModelKind.FLOATING
    scale: float = 0.0
    explicit_grid_size: float = 0.0

    def __post_init__(self) -> None:
        kind = ModelKind.from_name(self.kind)
        scale = abs(float(self.scale))
        grid_size = abs(float(self.explicit_grid_size))

        if kind is ModelKind.FIXED:
            if not math.isfinite(grid_size):
                raise InvalidScaleError(
                    self.explicit_grid_size, "grid size must be finite"
                )
            # An explicit grid size is authoritative over the given scale.
            if grid_size != 0:
                scale = 1.0 / grid_size
            if scale == 0 or not math.isfinite(scale):
                raise InvalidScaleError(self.scale)
        elif scale != 0 or grid_size != 0:
            raise InvalidScaleError(
                self.scale, f"{kind} models do not carry a scale or grid size"
            )

        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "scale", scale)
        object.__setattr__(self, "explicit_grid_size", grid_size)

    @classmethod
    def of_kind(cls, kind: Union[str, ModelKind]) -> "PrecisionModel":
        """
        Build a model of the given kind. FIXED models get a unit scale.

        :param kind: ModelKind or its name
        :return: PrecisionModel
        """
        kind = ModelKind.from_name(kind)

        if kind is ModelKind.FIXED:
            return cls.fixed(1.0)

        return cls(kind=kind)

    @classmethod
    def fixed(cls, scale: float) -> "PrecisionModel":
        """
        Build a FIXED model.

        A positive value is the scale factor (1000 keeps three decimal
        places). A negative value is the grid size, so ``fixed(-0.001)``
        describes the same grid as ``fixed(1000)``.

        :param scale: Scale factor, or negated grid size
        :return: PrecisionModel
        """
        scale = float(scale)

        if scale == 0 or not math.isfinite(scale):
            raise InvalidScaleError(scale)

        if scale < 0:
            grid_size = abs(scale)
            return cls(
                kind=ModelKind.FIXED,
                scale=1.0 / grid_size,
                explicit_grid_size=grid_size,
            )

        return cls(kind=ModelKind.FIXED, scale=scale)

    @classmethod
    def fixed_with_offsets(
        cls, scale: float, offset_x: float, offset_y: float
    ) -> "PrecisionModel":
        """Legacy form of ``fixed``. Offsets are accepted and ignored."""
        return cls.fixed(scale)

    @classmethod
    def copy_of(cls, other: "PrecisionModel") -> "PrecisionModel":
        return replace(other)

    @staticmethod
    def most_precise(pm1: "PrecisionModel", pm2: "PrecisionModel") -> "PrecisionModel":
        """
        Pick the more precise of two models, preferring the first on ties.
        """
        if pm1.compare_to(pm2) >= 0:
            return pm1

        return pm2

    @property
    def offset_x(self) -> float:
        return 0.0

    @property
    def offset_y(self) -> float:
        return 0.0

    def get_type(self) -> ModelKind:
        return self.kind

    def get_scale(self) -> float:
        return self.scale

    def is_floating(self) -> bool:
        return self.kind.is_floating

    def grid_size(self) -> float:
        """
        Spacing between adjacent grid values.

        :return: The explicit grid size when one was given, ``1 / scale``
            otherwise, and NaN for floating models
        """
        if self.is_floating():
            return math.nan

        if self.explicit_grid_size != 0:
            return self.explicit_grid_size

        return 1.0 / self.scale

    def get_maximum_significant_digits(self) -> int:
        """
        Estimate how many significant decimal digits the model can hold.

        For FIXED models this is ``1 + ceil(log10(scale))``, which counts one
        digit more than needed when the scale is a power of ten. Writers use
        the result to choose an output precision.

        Scales below 1 (grid sizes above 1) give zero or negative counts,
        e.g. -1 for a grid size of 100.
        """
        if self.kind is ModelKind.FLOATING_SINGLE:
            return 6

        if self.kind is ModelKind.FIXED:
            return 1 + math.ceil(math.log10(self.scale))

        return 16

    def make_precise(self, value: float) -> float:
        """
        Round a single ordinate to this model.

        :param value: Ordinate value
        :return: Rounded value; NaN is returned unchanged
        """
        if math.isnan(value):
            return value

        if self.kind is ModelKind.FLOATING_SINGLE:
            return to_single_precision(value)

        if self.kind is ModelKind.FIXED:
            if self.explicit_grid_size > 0:
                grid_size = self.explicit_grid_size
                return round_half_away_from_zero(value / grid_size) * grid_size

            return round_half_away_from_zero(value * self.scale) / self.scale

        return value

    def make_precise_coordinate(self, coord: Coordinate) -> Coordinate:
        """
        Round the x and y of a coordinate. The z ordinate is left as is.
        """
        if self.kind is ModelKind.FLOATING:
            return coord

        return coord.with_xy(self.make_precise(coord.x), self.make_precise(coord.y))

    def to_internal(self, external: Coordinate) -> Coordinate:
        return replace(self.make_precise_coordinate(external))

    def to_external(self, internal: Coordinate) -> Coordinate:
        return replace(internal)

    def compare_to(self, other: "PrecisionModel") -> int:
        """
        Compare by maximum significant digits.

        Only an approximation when one model is floating and the other is
        fixed, but always a total order.

        :return: -1, 0 or 1
        """
        digits = self.get_maximum_significant_digits()
        other_digits = other.get_maximum_significant_digits()

        return (digits > other_digits) - (digits < other_digits)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, PrecisionModel):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __eq__(self, other: Any) -> bool:
        # Grid size bookkeeping is not part of equality.
        if not isinstance(other, PrecisionModel):
            return False

        return self.kind is other.kind and double_bits(self.scale) == double_bits(
            other.scale
        )

    def __hash__(self) -> int:
        return hash((self.kind, double_bits(self.scale)))

    def __str__(self) -> str:
        if self.kind is ModelKind.FLOATING:
            return "Floating"

        if self.kind is ModelKind.FLOATING_SINGLE:
            return "Floating-Single"

        return f"Fixed (Scale={self.scale!r})"
