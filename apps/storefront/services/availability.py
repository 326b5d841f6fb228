"""
Option availability for the variant selector.
Availability is INFERRED from the variant list, not configured per option.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from apps.storefront.models import ProductOption, ProductVariant


def is_option_value_available(
    option_name: str,
    option_value: str,
    current_selection: Mapping[str, str],
    variants: Iterable[ProductVariant],
) -> bool:
    """
    Check whether choosing `option_value` for `option_name` can still lead to
    an in-stock variant, given the rest of the current selection.

    Options missing from the selection impose no constraint, so a value is
    only disabled when every variant it could lead to is unavailable.

    Example:
        current_selection = {'Color': 'Red'}
        -> 'Size'='S' is available only if some Red/S variant is for sale
    """
    hypothetical_selection = dict(current_selection)
    hypothetical_selection[option_name] = option_value

    return any(
        variant.available_for_sale
        and all(
            opt.name not in hypothetical_selection
            or hypothetical_selection[opt.name] == opt.value
            for opt in variant.selected_options
        )
        for variant in variants
    )


def first_available_value(
    option: ProductOption,
    variants: Sequence[ProductVariant],
) -> Optional[str]:
    """First value, in display order, available against an empty selection."""
    for value in option.values:
        if is_option_value_available(option.name, value, {}, variants):
            return value
    return None


def available_values(
    option: ProductOption,
    current_selection: Mapping[str, str],
    variants: Sequence[ProductVariant],
) -> List[str]:
    return [
        value for value in option.values
        if is_option_value_available(option.name, value, current_selection, variants)
    ]


def option_availability(
    options: Iterable[ProductOption],
    current_selection: Mapping[str, str],
    variants: Sequence[ProductVariant],
) -> Dict[str, Dict[str, bool]]:
    """
    Availability of every option value given the current selection.

    Returns:
        Dict with option names as keys and {value: is_available} dicts
        (in display order) as values
    """
    return {
        option.name: {
            value: is_option_value_available(
                option.name, value, current_selection, variants
            )
            for value in option.values
        }
        for option in options
    }
