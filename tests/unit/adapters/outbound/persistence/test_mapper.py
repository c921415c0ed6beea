import json

import pytest

from geoprecision.adapters.outbound.persistence.mapper import PrecisionModelMapper
from geoprecision.adapters.outbound.persistence.models import PrecisionModelRecord
from geoprecision.domain.exceptions import InvalidScaleError
from geoprecision.domain.values import ModelKind, PrecisionModel


@pytest.mark.parametrize(
    "model",
    [
        PrecisionModel(),
        PrecisionModel.of_kind(ModelKind.FLOATING_SINGLE),
        PrecisionModel.fixed(1000),
        PrecisionModel.fixed(-0.001),
    ],
    ids=str,
)
def test_mapper_roundtrip_through_json(model):
    # Given
    mapper = PrecisionModelMapper()

    # When
    payload = json.dumps(mapper.to_record(model).to_dict())
    restored = mapper.to_model(PrecisionModelRecord.from_dict(json.loads(payload)))

    # Then
    assert restored == model
    assert restored.kind is model.kind
    assert restored.explicit_grid_size == model.explicit_grid_size
    assert restored.grid_size() == model.grid_size() or model.is_floating()


def test_mapper_keeps_kind_name_and_grid_size():
    record = PrecisionModelMapper.to_record(PrecisionModel.fixed(-0.001))

    assert record.kind == "FIXED"
    assert record.scale == 1000.0
    assert record.grid_size == 0.001


def test_mapper_rejects_fixed_record_without_scale():
    record = PrecisionModelRecord(kind="FIXED", scale=0.0, grid_size=0.0)

    with pytest.raises(InvalidScaleError):
        PrecisionModelMapper.to_model(record)


def test_mapper_grid_size_wins_over_inconsistent_scale():
    # Given
    record = PrecisionModelRecord.from_dict(
        {"kind": "FIXED", "scale": 1000.0, "grid_size": 0.5}
    )

    # When
    model = PrecisionModelMapper.to_model(record)

    # Then
    assert model.scale == 2.0
    assert model == PrecisionModel.fixed(-0.5)
    assert model != PrecisionModel.fixed(1000)
    assert model.make_precise(1.2345) == 1.0
    assert model.get_maximum_significant_digits() == 2
