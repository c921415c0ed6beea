from .base import DomainException


class PrecisionModelError(DomainException):
    """Base exception for precision-model errors."""

    pass


class InvalidScaleError(PrecisionModelError, ValueError):
    """Raised when a fixed precision model is given a degenerate scale."""

    def __init__(self, scale: float, reason: str = "scale must be finite and non-zero"):
        self.scale = scale

        super().__init__(f"Invalid scale {scale!r}: {reason}")


class UnknownModelKindError(PrecisionModelError, ValueError):
    """Raised when a model kind name does not match any known kind."""

    def __init__(self, name: str):
        self.name = name

        super().__init__(f"Unknown precision model kind: {name!r}")
