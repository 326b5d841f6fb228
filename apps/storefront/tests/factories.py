"""
Builders for storefront test data: models and Storefront API payloads.
"""
from __future__ import annotations

from apps.storefront.models import (
    Image,
    Money,
    PriceRange,
    Product,
    ProductOption,
    ProductVariant,
    SelectedOption,
)


def money(amount, currency_code='USD'):
    return Money(amount=amount, currency_code=currency_code)


def image(image_id, url=None, alt_text=None):
    return Image(
        id=image_id,
        url=url or f"https://cdn.example.com/{image_id}.jpg",
        alt_text=alt_text,
    )


def option(name, values):
    return ProductOption(name=name, values=tuple(values))


def variant(variant_id, options=None, available=True, price='10.00',
            compare_at=None, variant_image=None):
    return ProductVariant(
        id=variant_id,
        title=' / '.join((options or {}).values()) or 'Default Title',
        available_for_sale=available,
        price=money(price),
        compare_at_price=money(compare_at) if compare_at else None,
        selected_options=tuple(
            SelectedOption(name=name, value=value)
            for name, value in (options or {}).items()
        ),
        image=variant_image,
    )


def product(handle='classic-tee', options=(), variants=(), **kwargs):
    kwargs.setdefault('price_range', PriceRange(money('10.00'), money('20.00')))
    return Product(
        id=f"gid://shopify/Product/{handle}",
        handle=handle,
        title=kwargs.pop('title', 'Classic Tee'),
        options=tuple(options),
        variants=tuple(variants),
        **kwargs,
    )


def size_scenario():
    """Size S/M/L where S is sold out and L has no variant."""
    options = [option('Size', ['S', 'M', 'L'])]
    variants = [
        variant('v-s', {'Size': 'S'}, available=False, price='10.00'),
        variant('v-m', {'Size': 'M'}, available=True, price='20.00'),
    ]
    return options, variants


def tee_product():
    """Size x Color tee; Red/L is sold out, Blue/S does not exist."""
    return product(
        handle='classic-tee',
        options=[option('Size', ['S', 'M', 'L']), option('Color', ['Red', 'Blue'])],
        variants=[
            variant('v-s-red', {'Size': 'S', 'Color': 'Red'}, price='10.00'),
            variant('v-m-red', {'Size': 'M', 'Color': 'Red'}, price='12.00'),
            variant('v-l-red', {'Size': 'L', 'Color': 'Red'}, available=False, price='14.00'),
            variant('v-m-blue', {'Size': 'M', 'Color': 'Blue'}, price='12.00',
                    compare_at='15.00', variant_image=image('img-blue')),
            variant('v-l-blue', {'Size': 'L', 'Color': 'Blue'}, price='14.00'),
        ],
        price_range=PriceRange(money('10.00'), money('14.00')),
        featured_image=image('img-featured'),
        images=(image('img-featured'), image('img-blue'), image('img-back')),
        vendor='Acme',
        description='Soft cotton tee.',
        description_html='<p>Soft cotton tee.</p>',
    )


# =============================================================================
# Storefront API payloads
# =============================================================================

def money_payload(amount, currency_code='USD'):
    return {'amount': amount, 'currencyCode': currency_code}


def image_payload(image_id, alt_text=None):
    return {
        'id': image_id,
        'url': f"https://cdn.example.com/{image_id}.jpg",
        'altText': alt_text,
        'width': 800,
        'height': 800,
    }


def variant_payload(variant_id, options, available=True, price='10.00', compare_at=None):
    return {
        'id': variant_id,
        'title': ' / '.join(options.values()),
        'availableForSale': available,
        'quantityAvailable': None,
        'price': money_payload(price),
        'compareAtPrice': money_payload(compare_at) if compare_at else None,
        'selectedOptions': [
            {'name': name, 'value': value} for name, value in options.items()
        ],
        'image': None,
    }


def product_payload(handle='classic-tee'):
    return {
        'id': f"gid://shopify/Product/{handle}",
        'handle': handle,
        'title': 'Classic Tee',
        'description': 'Soft cotton tee.',
        'descriptionHtml': '<p>Soft cotton tee.</p>',
        'vendor': 'Acme',
        'tags': ['cotton'],
        'featuredImage': image_payload('img-featured', 'Front'),
        'images': {'nodes': [image_payload('img-featured', 'Front'), image_payload('img-back')]},
        'options': [
            {'id': 'opt-size', 'name': 'Size', 'values': ['S', 'M']},
        ],
        'priceRange': {
            'minVariantPrice': money_payload('10.00'),
            'maxVariantPrice': money_payload('12.00'),
        },
        'compareAtPriceRange': None,
        'variants': {
            'nodes': [
                variant_payload('v-s', {'Size': 'S'}, available=False, price='10.00'),
                variant_payload('v-m', {'Size': 'M'}, price='12.00', compare_at='15.00'),
            ],
        },
    }


def collection_payload(handle='all'):
    return {
        'id': f"gid://shopify/Collection/{handle}",
        'handle': handle,
        'title': 'All Products',
        'description': '',
        'products': {
            'nodes': [
                {
                    'id': 'gid://shopify/Product/classic-tee',
                    'handle': 'classic-tee',
                    'title': 'Classic Tee',
                    'description': 'Soft cotton tee.',
                    'featuredImage': None,
                    'priceRange': {
                        'minVariantPrice': money_payload('10.00'),
                        'maxVariantPrice': money_payload('20.00'),
                    },
                    'compareAtPriceRange': {
                        'minVariantPrice': money_payload('15.00'),
                        'maxVariantPrice': money_payload('25.00'),
                    },
                    'options': [{'name': 'Size', 'values': ['S', 'M']}],
                    'variants': {'nodes': [{'availableForSale': True}]},
                },
            ],
        },
    }
