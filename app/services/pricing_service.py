from __future__ import annotations

from app.exceptions import InvalidTaxRateError
from app.models.tax import shared_tax
from app.services.common import to_float_safe


class PricingService:
    """Read and change the shared tax rate."""

    @staticmethod
    def get_tax() -> float:
        return shared_tax.get()

    @staticmethod
    def set_tax(raw) -> float:
        """Accepts 0.18 or "0.18"; raises InvalidTaxRateError otherwise."""
        rate = to_float_safe(raw)
        if rate is None:
            raise InvalidTaxRateError(f"Error: tax rate must be a number, got {raw!r}")
        shared_tax.set(rate)
        return shared_tax.get()
