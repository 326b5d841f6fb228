import logging
from urllib.parse import urlencode

from django.conf import settings
from django.shortcuts import render
from django.views.decorators.http import require_http_methods

from .exceptions import StorefrontError, StorefrontQueryError
from .services import QuickView, ViewStatus, get_storefront_client
from .services.display import (
    card_prices,
    display_compare_at_price,
    display_price,
    gallery_images,
)

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
def product_grid_view(request):
    """Home page: product cards of the configured collection."""
    collection_handle = getattr(settings, 'STOREFRONT_COLLECTION_HANDLE', 'all')
    limit = getattr(settings, 'STOREFRONT_COLLECTION_LIMIT', 12)

    context = {
        'collection_handle': collection_handle,
        'collection': None,
        'cards': [],
        'error': None,
        'error_detail': None,
    }

    try:
        collection = get_storefront_client().fetch_collection(collection_handle, limit)
    except StorefrontQueryError as e:
        logger.error("GraphQL errors for collection %r: %s", collection_handle, e.errors)
        context['error'] = "Error fetching products. Check the server log for details."
        return render(request, 'storefront/product_grid.html', context, status=502)
    except StorefrontError as e:
        logger.error("Failed to fetch products: %s", e)
        context['error'] = "Failed to connect to Shopify"
        context['error_detail'] = str(e) or "Unknown error occurred"
        return render(request, 'storefront/product_grid.html', context, status=502)

    context['collection'] = collection
    for product in (collection.products if collection else ()):
        price, compare_at = card_prices(product)
        context['cards'].append({
            'product': product,
            'price': price,
            'compare_at_price': compare_at,
        })

    return render(request, 'storefront/product_grid.html', context)


@require_http_methods(["GET"])
def quick_view(request, handle):
    """
    Quick view fragment for one product.

    Option selections come from the query string (e.g., ?Size=M). Like the
    option pills, only values that are currently available are applied.
    """
    client = get_storefront_client()
    view = QuickView(client.fetch_product_by_handle)
    detail_request = view.open(handle)
    view.load(detail_request)

    if view.status == ViewStatus.NOT_FOUND:
        return render(request, 'storefront/quick_view_error.html', {
            'handle': handle,
            'message': "Product not found",
        }, status=404)

    if view.status == ViewStatus.ERROR:
        return render(request, 'storefront/quick_view_error.html', {
            'handle': handle,
            'message': view.error or "Failed to load product",
        }, status=502)

    product = view.product
    selection = view.selection
    for option in product.options:
        value = request.GET.get(option.name)
        if value is not None and selection.is_option_available(option.name, value):
            selection.select_option(option.name, value)

    state = selection.state
    availability = selection.option_availability()
    price = display_price(product, state.resolved_variant)

    context = {
        'product': product,
        'state': state,
        'price': price,
        'compare_at_price': display_compare_at_price(product, state.resolved_variant),
        'images': gallery_images(
            product.images, product.featured_image, state.selected_variant_image
        ),
        'option_rows': [
            {
                'option': option,
                'selected_value': state.selected_options.get(option.name),
                'values': [
                    {
                        'value': value,
                        'is_available': availability[option.name][value],
                        'is_selected': state.selected_options.get(option.name) == value,
                        'query': urlencode({**state.selected_options, option.name: value}),
                    }
                    for value in option.values
                ],
            }
            for option in product.options
        ],
    }
    return render(request, 'storefront/quick_view.html', context)
