from .coordinate import Coordinate
from .model_kind import ModelKind
from .precision_model import MAXIMUM_PRECISE_VALUE, PrecisionModel

__all__ = [
    "Coordinate",
    "ModelKind",
    "PrecisionModel",
    "MAXIMUM_PRECISE_VALUE",
]
