from .availability import (
    available_values,
    first_available_value,
    is_option_value_available,
    option_availability,
)
from .variant_resolver import resolve_variant
from .variant_selection import SelectionState, VariantSelection, initial_selection
from .quick_view import DetailRequest, QuickView, ViewStatus
from .shopify import StorefrontClient, get_storefront_client

__all__ = [
    'available_values',
    'first_available_value',
    'is_option_value_available',
    'option_availability',
    'resolve_variant',
    'SelectionState',
    'VariantSelection',
    'initial_selection',
    'DetailRequest',
    'QuickView',
    'ViewStatus',
    'StorefrontClient',
    'get_storefront_client',
]
