"""
Display rules shared by the product grid and the quick view.
"""

from typing import List, Optional

from apps.storefront.models import Image, Product, ProductSummary, ProductVariant
from apps.storefront.utils.format import format_price, format_price_range


def display_price(product: Product, resolved_variant: Optional[ProductVariant]) -> str:
    """Variant price when a variant is resolved, else the lowest product price."""
    if resolved_variant and resolved_variant.price:
        return format_price(resolved_variant.price)
    return format_price(product.price_range.min_variant_price)


def display_compare_at_price(
    product: Product,
    resolved_variant: Optional[ProductVariant],
) -> Optional[str]:
    """
    Struck-through "was" price, or None when there is nothing to show.
    Hidden when it would repeat the display price.
    """
    if resolved_variant and resolved_variant.compare_at_price:
        compare_at = format_price(resolved_variant.compare_at_price)
    elif product.compare_at_price_range.min_variant_price:
        compare_at = format_price(product.compare_at_price_range.min_variant_price)
    else:
        return None

    if not compare_at or compare_at == display_price(product, resolved_variant):
        return None
    return compare_at


def card_prices(product: ProductSummary):
    """
    Price strings for a product card.

    Returns:
        Tuple of (price range, compare-at range or None). The compare-at
        range is only shown when it starts above the price range.
    """
    price_range = product.price_range
    compare_range = product.compare_at_price_range
    price = format_price_range(
        price_range.min_variant_price, price_range.max_variant_price
    )

    compare_min = compare_range.min_variant_price
    price_min = price_range.min_variant_price
    if not compare_min or not price_min:
        return price, None

    compare_amount = compare_min.decimal_amount
    price_amount = price_min.decimal_amount
    if compare_amount is None or price_amount is None or compare_amount <= price_amount:
        return price, None

    compare_at = format_price_range(compare_min, compare_range.max_variant_price)
    return price, compare_at or None


def gallery_images(
    images,
    featured_image: Optional[Image] = None,
    selected_variant_image: Optional[Image] = None,
) -> List[Image]:
    """
    Images in gallery order.
    The primary image (variant image, else featured image, else first image)
    comes first, followed by the remaining images without repeats.
    """
    images = list(images)
    primary = selected_variant_image or featured_image or (images[0] if images else None)
    if primary is None:
        return images

    ordered = [primary]
    seen = {primary.id if primary.id is not None else primary.url}
    for image in images:
        key = image.id if image.id is not None else image.url
        if key in seen:
            continue
        seen.add(key)
        ordered.append(image)
    return ordered
