"""
Storefront models: read-only snapshots of the commerce catalog.

Model Hierarchy:
- Collection: Named list of products (e.g., "All")
- ProductSummary: Card-level product data used by the collection grid
- Product: Full product detail used by the quick view
- ProductOption: Axis of variation (Size, Color) with ordered values
- ProductVariant: Purchasable combination of option values
- Money, PriceRange, Image: Value objects shared by the above

Nothing here is persisted. Instances are built from Storefront API payloads
and replaced wholesale whenever another product is fetched.
"""

from .money import Money, PriceRange
from .image import Image
from .variant import SelectedOption, ProductVariant
from .product import ProductOption, Product, ProductSummary
from .collection import Collection

__all__ = [
    'Money',
    'PriceRange',
    'Image',
    'SelectedOption',
    'ProductVariant',
    'ProductOption',
    'Product',
    'ProductSummary',
    'Collection',
]
