import math
from typing import Iterable, Optional

from geoprecision.domain.values import Coordinate, PrecisionModel
from geoprecision.shared.logging import get_logger


class RoundingService:
    """
    Domain service applying a precision model to batches of ordinates.
    """

    def __init__(self, precision_model: Optional[PrecisionModel] = None):
        self._model = precision_model or PrecisionModel()
        self._logger = get_logger(__name__)

    @property
    def precision_model(self) -> PrecisionModel:
        return self._model

    def normalize_value(self, value: float) -> float:
        return self._model.make_precise(value)

    def normalize_values(self, values: Iterable[float]) -> list[float]:
        """
        Round every value to the model grid.

        :param values: Ordinate values
        :return: Rounded values, in input order
        """
        result = [self._model.make_precise(v) for v in values]

        self._logger.debug(
            "values_normalized", model=str(self._model), count=len(result)
        )
        return result

    def normalize_coordinates(
        self, coordinates: Iterable[Coordinate]
    ) -> list[Coordinate]:
        """
        Round the planar ordinates of every coordinate.

        :param coordinates: Coordinates to round
        :return: New coordinates; z values are carried over unchanged
        """
        result = [self._model.make_precise_coordinate(c) for c in coordinates]

        self._logger.debug(
            "coordinates_normalized", model=str(self._model), count=len(result)
        )
        return result

    def is_precise(self, value: float) -> bool:
        """
        Check if value already lies on the model grid.

        :param value: Value to check
        :return: bool(is rounding a no-op for this value?)
        """
        if math.isnan(value):
            return True

        return self._model.make_precise(value) == value
