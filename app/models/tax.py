import math
from numbers import Real

from ..exceptions import InvalidTaxRateError
from ..utils.constants import DEFAULT_TAX_RATE


class TaxConfig:
    """
    Holds the tax rate applied on top of every vehicle's rental cost.

    A single shared instance (`shared_tax`) is read by all cost computations.
    It is not synchronized: set it at startup, before cost queries run.
    """

    def __init__(self, rate: float = DEFAULT_TAX_RATE) -> None:
        self._rate = self._validate(rate)

    @staticmethod
    def _validate(rate) -> float:
        if isinstance(rate, bool) or not isinstance(rate, Real):
            raise InvalidTaxRateError(f"Error: tax rate must be a number, got {rate!r}")
        if not math.isfinite(rate):
            raise InvalidTaxRateError(f"Error: tax rate must be finite, got {rate!r}")
        if rate < 0:
            raise InvalidTaxRateError(f"Error: tax rate cannot be negative ({rate})")
        return float(rate)

    @property
    def rate(self) -> float:
        return self._rate

    def get(self) -> float:
        return self._rate

    def set(self, rate: float) -> None:
        self._rate = self._validate(rate)

    def reset(self) -> None:
        self._rate = DEFAULT_TAX_RATE


shared_tax = TaxConfig()


def resolve_rate(tax_rate=None) -> float:
    """The shared rate when `tax_rate` is None, else `tax_rate` after validation."""
    return shared_tax.get() if tax_rate is None else TaxConfig._validate(tax_rate)
