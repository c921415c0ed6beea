import math

from geoprecision.domain.services.rounding_service import RoundingService
from geoprecision.domain.values import Coordinate, ModelKind, PrecisionModel


def test_default_service_uses_floating_model():
    svc = RoundingService()

    assert svc.precision_model == PrecisionModel()
    assert svc.normalize_value(1.23456789) == 1.23456789


def test_normalize_values_keeps_order():
    svc = RoundingService(PrecisionModel.fixed(1))

    assert svc.normalize_values([2.5, -2.5, 0.4, math.inf]) == [3.0, -3.0, 0.0, math.inf]


def test_normalize_values_accepts_generators():
    svc = RoundingService(PrecisionModel.fixed(10))

    assert svc.normalize_values(v / 100 for v in range(3)) == [0.0, 0.0, 0.0]


def test_normalize_coordinates_rounds_xy_only():
    # Given
    svc = RoundingService(PrecisionModel.fixed(-0.5))
    coords = [Coordinate(1.3, 1.2, 9.99), Coordinate(-1.25, 0.1, 1.01)]

    # When
    result = svc.normalize_coordinates(coords)

    # Then
    assert [(c.x, c.y, c.z) for c in result] == [(1.5, 1.0, 9.99), (-1.5, 0.0, 1.01)]


def test_is_precise():
    svc = RoundingService(PrecisionModel.fixed(1000))

    assert svc.is_precise(1.234) is True
    assert svc.is_precise(1.2345678) is False
    assert svc.is_precise(math.nan) is True


def test_is_precise_single():
    svc = RoundingService(PrecisionModel.of_kind(ModelKind.FLOATING_SINGLE))

    assert svc.is_precise(0.5) is True
    assert svc.is_precise(0.1) is False
