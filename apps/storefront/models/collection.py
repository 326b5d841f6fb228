from dataclasses import dataclass
from typing import Tuple

from .product import ProductSummary


@dataclass(frozen=True)
class Collection:
    id: str
    handle: str
    title: str
    description: str = ''
    products: Tuple[ProductSummary, ...] = ()

    def __str__(self):
        return self.title
