from django import template

from apps.storefront.utils.format import (
    format_price,
    format_price_range,
    get_image_alt,
    get_image_url,
)

register = template.Library()


@register.filter
def money(value):
    """{{ variant.price|money }} -> "$19.99" """
    return format_price(value)


@register.filter
def price_range(value):
    """{{ product.price_range|price_range }} -> "$10.00 - $20.00" """
    if not value:
        return ''
    return format_price_range(value.min_variant_price, value.max_variant_price)


@register.filter
def image_url(image, fallback=None):
    return get_image_url(image, fallback)


@register.filter
def image_alt(image, fallback=''):
    return get_image_alt(image, fallback)
