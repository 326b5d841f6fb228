"""
Selection state for the quick view variant selector.

Tracks the selected options (e.g., {'Size': 'M', 'Color': 'Blue'}) of one
product and derives the resolved variant, its price and its image from them.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

from apps.storefront.models import Image, ProductOption, ProductVariant

from .availability import (
    first_available_value,
    is_option_value_available,
    option_availability,
)
from .variant_resolver import resolve_variant

logger = logging.getLogger(__name__)


def initial_selection(
    options: Sequence[ProductOption],
    variants: Sequence[ProductVariant],
) -> Dict[str, str]:
    """
    Default selection: the first available value of each option.
    Options with no available value stay unset.
    """
    initial = {}
    for option in options:
        value = first_available_value(option, variants)
        if value is not None:
            initial[option.name] = value
    return initial


def selection_key(
    options: Sequence[ProductOption],
    variants: Sequence[ProductVariant],
) -> Tuple:
    """
    Structural key of the data a selection depends on.
    Equal keys mean re-fetched data describes the same product.
    """
    return (
        tuple((option.name, tuple(option.values)) for option in options),
        tuple(
            (
                variant.id,
                variant.available_for_sale,
                tuple((opt.name, opt.value) for opt in variant.selected_options),
            )
            for variant in variants
        ),
    )


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of a selection and everything derived from it."""
    selected_options: Dict[str, str] = field(default_factory=dict)
    resolved_variant: Optional[ProductVariant] = None
    price: Optional[str] = None
    selected_variant_image: Optional[Image] = None

    @property
    def can_add_to_bag(self):
        return bool(self.resolved_variant and self.resolved_variant.available_for_sale)


class VariantSelection:
    """
    Owns the selected options of one product.

    The selection is reset to defaults whenever the option/variant content
    changes; it is mutated only through `select_option` otherwise. Derived
    values are computed from the current selection on every read.
    """

    def __init__(self, options=(), variants=()):
        self._options: Tuple[ProductOption, ...] = ()
        self._variants: Tuple[ProductVariant, ...] = ()
        self._key = None
        self._selected_options: Dict[str, str] = {}
        self.update_product(options, variants)

    @property
    def options(self):
        return self._options

    @property
    def variants(self):
        return self._variants

    @property
    def selected_options(self) -> Dict[str, str]:
        return dict(self._selected_options)

    def update_product(self, options, variants) -> bool:
        """
        Replace the option/variant data.

        Returns:
            True when the content changed and the selection was reset
        """
        options = tuple(options)
        variants = tuple(variants)
        key = selection_key(options, variants)

        self._options = options
        self._variants = variants

        if key == self._key:
            return False

        self._key = key
        self._selected_options = initial_selection(options, variants)
        logger.debug("Selection reset to defaults %s", self._selected_options)
        return True

    def select_option(self, option_name: str, value: str):
        """
        Select a value for an option.
        Availability is not checked here; callers only offer available values.
        """
        self._selected_options[option_name] = value

    def is_option_available(self, option_name: str, value: str) -> bool:
        return is_option_value_available(
            option_name, value, self._selected_options, self._variants
        )

    def option_availability(self):
        return option_availability(self._options, self._selected_options, self._variants)

    @property
    def resolved_variant(self) -> Optional[ProductVariant]:
        return resolve_variant(self._options, self._variants, self._selected_options)

    @property
    def price(self) -> Optional[str]:
        return self.state.price

    @property
    def selected_variant_image(self) -> Optional[Image]:
        return self.state.selected_variant_image

    @property
    def state(self) -> SelectionState:
        variant = self.resolved_variant
        return SelectionState(
            selected_options=self.selected_options,
            resolved_variant=variant,
            price=variant.price.amount if variant and variant.price else None,
            selected_variant_image=variant.image if variant else None,
        )
