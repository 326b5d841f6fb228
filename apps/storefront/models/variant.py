from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .image import Image
from .money import Money


@dataclass(frozen=True)
class SelectedOption:
    """One (option name, value) pair of a variant."""
    name: str
    value: str


@dataclass(frozen=True)
class ProductVariant:
    """
    Individual purchasable combination of option values.
    Each variant carries one SelectedOption per option of its product.
    """
    id: str
    available_for_sale: bool
    price: Money
    selected_options: Tuple[SelectedOption, ...] = ()
    compare_at_price: Optional[Money] = None
    image: Optional[Image] = None
    title: str = ''
    quantity_available: Optional[int] = None

    def __str__(self):
        return self.title or self.id

    def get_options_dict(self) -> Dict[str, str]:
        """Return dict of {option_name: option_value}"""
        return {opt.name: opt.value for opt in self.selected_options}

    @property
    def is_on_sale(self):
        if not self.compare_at_price:
            return False
        compare_at = self.compare_at_price.decimal_amount
        price = self.price.decimal_amount
        return compare_at is not None and price is not None and compare_at > price
