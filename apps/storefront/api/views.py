import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.storefront.exceptions import StorefrontError, StorefrontQueryError
from apps.storefront.services import VariantSelection, get_storefront_client
from .serializers import (
    CollectionSerializer,
    ProductDetailSerializer,
    SelectionStateSerializer,
)

logger = logging.getLogger(__name__)


def _fetch_error_response(error, message):
    if isinstance(error, StorefrontQueryError):
        return Response(
            {
                'error': message,
                'details': str(error) or "GraphQL query failed",
                'graphql_errors': error.error_details,
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    return Response(
        {'error': message},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


class ProductDetailView(APIView):
    """
    API endpoint for one product, by handle.
    Returns {"product": {...}} with all options and variants.
    """

    def get(self, request, handle):
        try:
            product = get_storefront_client().fetch_product_by_handle(handle)
        except StorefrontError as e:
            logger.error("Error fetching product %r: %s", handle, e)
            return _fetch_error_response(e, "Failed to fetch product")

        if product is None:
            return Response(
                {'error': f'Product with handle "{handle}" not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response({'product': ProductDetailSerializer(product).data})


class ProductSelectionView(APIView):
    """
    Variant selection state for a product.

    Starts from the default selection and applies option selections given
    as query params (e.g., ?Size=M&Color=Blue). Params that are not option
    names of the product are ignored.
    """
    exclude_params = ['format']

    def get(self, request, handle):
        try:
            product = get_storefront_client().fetch_product_by_handle(handle)
        except StorefrontError as e:
            logger.error("Error fetching product %r: %s", handle, e)
            return _fetch_error_response(e, "Failed to fetch product")

        if product is None:
            return Response(
                {'error': f'Product with handle "{handle}" not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        selection = VariantSelection(product.options, product.variants)
        option_names = {option.name for option in product.options}
        for name, value in request.query_params.items():
            if name in self.exclude_params or name not in option_names:
                continue
            selection.select_option(name, value)

        serializer = SelectionStateSerializer(
            selection.state,
            context={
                'product': product,
                'availability': selection.option_availability(),
            }
        )
        return Response(serializer.data)


class CollectionDetailView(APIView):
    """
    API endpoint for the products of a collection.

    Query params:
    - limit: Number of products (default 12, max 250)
    """
    default_limit = 12
    max_limit = 250

    def get(self, request, handle):
        try:
            limit = int(request.query_params.get('limit', self.default_limit))
        except (TypeError, ValueError):
            return Response(
                {'error': 'limit must be an integer'},
                status=status.HTTP_400_BAD_REQUEST
            )
        limit = max(1, min(limit, self.max_limit))

        try:
            collection = get_storefront_client().fetch_collection(handle, limit)
        except StorefrontError as e:
            logger.error("Error fetching collection %r: %s", handle, e)
            return _fetch_error_response(e, "Failed to fetch collection")

        if collection is None:
            return Response(
                {'error': f'Collection with handle "{handle}" not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response({'collection': CollectionSerializer(collection).data})


class DebugCollectionsView(APIView):
    """Lists the store's collections to find a handle for the grid."""

    def get(self, request):
        try:
            collections = get_storefront_client().fetch_collections()
        except StorefrontError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return Response({'collections': collections})


class DebugShopView(APIView):
    """Shows the shop the configured credentials point at."""

    def get(self, request):
        try:
            shop = get_storefront_client().fetch_shop()
        except StorefrontError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        return Response({'shop': shop})
