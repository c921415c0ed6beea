class DomainException(Exception):
    """Base class for all domain-level errors."""

    pass
