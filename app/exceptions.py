"""
Custom exception classes for the car-rental agency app.

Model constructors raise these on out-of-domain input; the service layer
raises the not-found errors so controllers can map them to HTTP status
codes instead of generic 500 errors.
"""


class ConstructionError(Exception):
    """Raised when a vehicle, capability or agency gets an out-of-domain value."""

    def __init__(self, message: str = "Error: invalid construction argument") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidTaxRateError(ConstructionError):
    """Raised when the shared tax rate is set to a negative or non-numeric value."""

    def __init__(self, message: str = "Error: tax rate must be a non-negative number") -> None:
        super().__init__(message)


class MergeCapacityError(Exception):
    """Raised when merging two agencies would drop a vehicle."""

    def __init__(self, message: str = "Error: merged agency cannot hold every vehicle") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class VehicleNotFoundError(Exception):
    """Raised when a vehicle ID cannot be found in the registry."""

    def __init__(self, message: str = "Error: vehicle not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class AgencyNotFoundError(Exception):
    """Raised when an agency name cannot be found in the registry."""

    def __init__(self, message: str = "Error: agency not found") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
