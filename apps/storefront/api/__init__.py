from .serializers import (
    MoneySerializer,
    PriceRangeSerializer,
    ImageSerializer,
    ProductVariantSerializer,
    ProductOptionSerializer,
    ProductSummarySerializer,
    ProductDetailSerializer,
    CollectionSerializer,
    SelectionStateSerializer,
)

__all__ = [
    'MoneySerializer',
    'PriceRangeSerializer',
    'ImageSerializer',
    'ProductVariantSerializer',
    'ProductOptionSerializer',
    'ProductSummarySerializer',
    'ProductDetailSerializer',
    'CollectionSerializer',
    'SelectionStateSerializer',
]
