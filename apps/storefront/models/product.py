from dataclasses import dataclass
from typing import Optional, Tuple

from .image import Image
from .money import PriceRange
from .variant import ProductVariant


@dataclass(frozen=True)
class ProductOption:
    """
    Named axis of variation (Size, Color, ...).
    `values` are in display order, not availability order.
    """
    name: str
    values: Tuple[str, ...] = ()
    id: Optional[str] = None

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Product:
    """
    Full product detail as shown in the quick view.
    Example: "Classic Tee" with options Size/Color and one variant per combination.
    """
    id: str
    handle: str
    title: str
    description: str = ''
    description_html: str = ''
    vendor: str = ''
    tags: Tuple[str, ...] = ()
    featured_image: Optional[Image] = None
    images: Tuple[Image, ...] = ()
    options: Tuple[ProductOption, ...] = ()
    price_range: PriceRange = PriceRange()
    compare_at_price_range: PriceRange = PriceRange()
    variants: Tuple[ProductVariant, ...] = ()

    def __str__(self):
        return self.title


@dataclass(frozen=True)
class ProductSummary:
    """
    Card-level product data for the collection grid.
    `available_for_sale` reflects the first variant only, or None if unknown.
    """
    id: str
    handle: str
    title: str
    description: str = ''
    featured_image: Optional[Image] = None
    price_range: PriceRange = PriceRange()
    compare_at_price_range: PriceRange = PriceRange()
    options: Tuple[ProductOption, ...] = ()
    available_for_sale: Optional[bool] = None

    def __str__(self):
        return self.title
