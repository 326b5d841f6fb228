"""
Resolve the variant matching a complete option selection.
"""

import logging
from typing import Mapping, Optional, Sequence

from apps.storefront.models import ProductOption, ProductVariant

logger = logging.getLogger(__name__)


def variant_matches(variant: ProductVariant, selected_options: Mapping[str, str]) -> bool:
    """
    Full match: every option of the variant must equal the selection.
    A variant without options matches any selection.
    """
    return all(
        selected_options.get(name) == value
        for name, value in variant.get_options_dict().items()
    )


def default_variant(variants: Sequence[ProductVariant]) -> Optional[ProductVariant]:
    """First variant for sale, otherwise the first variant."""
    for variant in variants:
        if variant.available_for_sale:
            return variant
    return variants[0] if variants else None


def resolve_variant(
    options: Sequence[ProductOption],
    variants: Sequence[ProductVariant],
    selected_options: Mapping[str, str],
) -> Optional[ProductVariant]:
    """
    Find the variant matching the given selections.

    Products without options resolve to their default variant, even when it
    is not for sale, so the UI can still show it as unavailable.

    Args:
        options: The product's option definitions
        variants: The product's variants
        selected_options: Dict of {option_name: value}

    Returns:
        Matching ProductVariant, or None for an incompatible combination
    """
    if not options and variants:
        return default_variant(variants)

    matches = [
        variant for variant in variants
        if variant_matches(variant, selected_options)
    ]
    if not matches:
        return None

    if len(matches) > 1:
        logger.warning(
            "Selection %s matches %d variants (%s); using the first one",
            dict(selected_options),
            len(matches),
            ', '.join(variant.id for variant in matches),
        )
    return matches[0]
