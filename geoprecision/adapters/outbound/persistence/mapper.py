from geoprecision.adapters.outbound.persistence.models import PrecisionModelRecord
from geoprecision.domain.values import ModelKind, PrecisionModel
from geoprecision.shared.logging import get_logger

logger = get_logger(__name__)


class PrecisionModelMapper:
    @staticmethod
    def to_record(model: PrecisionModel) -> PrecisionModelRecord:
        return PrecisionModelRecord(
            kind=model.kind.value,
            scale=model.scale,
            grid_size=model.explicit_grid_size,
        )

    @staticmethod
    def to_model(record: PrecisionModelRecord) -> PrecisionModel:
        kind = ModelKind.from_name(record.kind)

        model = PrecisionModel(
            kind=kind,
            scale=record.scale,
            explicit_grid_size=record.grid_size,
        )

        logger.debug("precision_model_restored", record=str(record), model=str(model))
        return model
