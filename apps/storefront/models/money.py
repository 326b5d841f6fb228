from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional


@dataclass(frozen=True)
class Money:
    """
    Amount in a given currency, as returned by the Storefront API.
    The amount stays a decimal string until it is formatted.
    """
    amount: str
    currency_code: str

    def __str__(self):
        return f"{self.amount} {self.currency_code}"

    @property
    def decimal_amount(self) -> Optional[Decimal]:
        """Parsed amount, or None when the string is not a finite number."""
        try:
            value = Decimal(str(self.amount).strip())
        except (InvalidOperation, ValueError):
            return None
        if not value.is_finite():
            return None
        return value


@dataclass(frozen=True)
class PriceRange:
    min_variant_price: Optional[Money] = None
    max_variant_price: Optional[Money] = None
