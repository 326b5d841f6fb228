"""
Utility functions for formatting Storefront data for display.
"""

from decimal import ROUND_HALF_UP, Decimal, DecimalException, localcontext
from typing import Optional

from django.conf import settings
from django.utils import formats, numberformat

from apps.storefront.models import Money

# Symbols used by the en-US currency style. Unknown codes fall back to the code.
CURRENCY_SYMBOLS = {
    'AUD': 'A$',
    'BRL': 'R$',
    'CAD': 'CA$',
    'CNY': 'CN¥',
    'EUR': '€',
    'GBP': '£',
    'HKD': 'HK$',
    'ILS': '₪',
    'INR': '₹',
    'JPY': '¥',
    'KRW': '₩',
    'MXN': 'MX$',
    'NZD': 'NZ$',
    'PHP': '₱',
    'TWD': 'NT$',
    'USD': '$',
    'VND': '₫',
    'XAF': 'FCFA',
    'XCD': 'EC$',
    'XOF': 'F CFA',
}

# ISO 4217 minor units where they differ from 2.
CURRENCY_DECIMALS = {
    'BHD': 3,
    'BIF': 0,
    'CLP': 0,
    'DJF': 0,
    'GNF': 0,
    'ISK': 0,
    'JOD': 3,
    'JPY': 0,
    'KMF': 0,
    'KRW': 0,
    'KWD': 3,
    'OMR': 3,
    'PYG': 0,
    'RWF': 0,
    'TND': 3,
    'UGX': 0,
    'VND': 0,
    'VUV': 0,
    'XAF': 0,
    'XOF': 0,
    'XPF': 0,
}

DEFAULT_PLACEHOLDER_IMAGE = '/static/storefront/img/placeholder-image.svg'


def _price_locale():
    return getattr(settings, 'STOREFRONT_PRICE_LOCALE', 'en-us')


def _format_amount(value, currency_code):
    decimal_pos = CURRENCY_DECIMALS.get(currency_code, 2)
    quantum = Decimal(1).scaleb(-decimal_pos)
    with localcontext() as ctx:
        # Room for every integer digit plus the minor units
        ctx.prec = max(ctx.prec, min(value.adjusted(), ctx.Emax) + decimal_pos + 2)
        rounded = abs(value).quantize(quantum, rounding=ROUND_HALF_UP)

    lang = _price_locale()
    number = numberformat.format(
        rounded,
        formats.get_format('DECIMAL_SEPARATOR', lang=lang),
        decimal_pos=decimal_pos,
        grouping=formats.get_format('NUMBER_GROUPING', lang=lang),
        thousand_sep=formats.get_format('THOUSAND_SEPARATOR', lang=lang),
        force_grouping=True,
    )

    symbol = CURRENCY_SYMBOLS.get(currency_code)
    text = f"{symbol}{number}" if symbol else f"{currency_code}\xa0{number}"
    if value < 0 and rounded != 0:
        return f"-{text}"
    return text


def format_price(money: Optional[Money]) -> str:
    """
    Format a Money value into a currency string.

    Decimal and thousand separators follow STOREFRONT_PRICE_LOCALE. The symbol
    (or the currency code) always leads the amount, as in the en-US currency
    style, whatever the locale.
    Returns an empty string when money is missing or its amount is malformed
    or cannot be rounded to the currency's minor units.
    """
    if not money:
        return ''

    value = money.decimal_amount
    if value is None:
        return ''

    currency_code = (money.currency_code or '').upper()
    if not currency_code:
        return ''

    try:
        return _format_amount(value, currency_code)
    except DecimalException:
        return ''


def format_price_range(min_price: Optional[Money], max_price: Optional[Money]) -> str:
    """
    Format a price range (min-max) into a string.
    Returns single price if min == max, otherwise "min - max".
    """
    if not min_price or not max_price:
        return ''

    low = min_price.decimal_amount
    high = max_price.decimal_amount
    if low is None or high is None:
        return ''

    if low == high:
        return format_price(min_price)

    low_text = format_price(min_price)
    high_text = format_price(max_price)
    if not low_text or not high_text:
        return ''
    return f"{low_text} - {high_text}"


def get_image_url(image, fallback=None) -> str:
    """Get the image URL with fallback to the placeholder image."""
    url = getattr(image, 'url', None) if image else None
    return (
        url
        or fallback
        or getattr(settings, 'STOREFRONT_PLACEHOLDER_IMAGE', DEFAULT_PLACEHOLDER_IMAGE)
    )


def get_image_alt(image, fallback: str) -> str:
    alt_text = getattr(image, 'alt_text', None) if image else None
    return alt_text or fallback
