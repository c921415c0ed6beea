from .base import DomainException
from .precision import InvalidScaleError, PrecisionModelError, UnknownModelKindError

__all__ = [
    "DomainException",
    "PrecisionModelError",
    "InvalidScaleError",
    "UnknownModelKindError",
]
