"""
Client for the Shopify Storefront GraphQL API.

This is the only module that talks to the network. Every fetch is a single
attempt; failures are raised as StorefrontError subclasses and handled by
the caller (views, QuickView).
"""

import logging

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.storefront.exceptions import (
    StorefrontQueryError,
    StorefrontTransportError,
)

from . import queries
from .payloads import CollectionSerializer, ProductSerializer, parse_payload

logger = logging.getLogger(__name__)


class StorefrontClient:
    """
    Storefront API client.

    Main methods:
    - fetch_collection(handle, limit) - products of a collection for the grid
    - fetch_product_by_handle(handle) - full product for the quick view
    - fetch_collections(limit) - collection listing for debugging
    """

    DEFAULT_API_VERSION = '2025-01'
    ACCESS_TOKEN_HEADER = 'X-Shopify-Storefront-Access-Token'

    def __init__(self, store_domain, access_token='', api_version=None,
                 timeout=None, session=None):
        if not store_domain:
            raise ImproperlyConfigured("SHOPIFY_STORE_DOMAIN is not configured")

        self.store_domain = store_domain.rstrip('/')
        if not self.store_domain.startswith(('http://', 'https://')):
            self.store_domain = f"https://{self.store_domain}"
        self.access_token = access_token
        self.api_version = api_version or self.DEFAULT_API_VERSION
        self.timeout = timeout
        self.session = session or requests.Session()

        if not self.access_token:
            logger.warning("SHOPIFY_STOREFRONT_ACCESS_TOKEN is not configured")

    @classmethod
    def from_settings(cls, **kwargs):
        return cls(
            store_domain=getattr(settings, 'SHOPIFY_STORE_DOMAIN', ''),
            access_token=getattr(settings, 'SHOPIFY_STOREFRONT_ACCESS_TOKEN', ''),
            api_version=getattr(settings, 'SHOPIFY_API_VERSION', None),
            timeout=getattr(settings, 'SHOPIFY_REQUEST_TIMEOUT', None),
            **kwargs,
        )

    @property
    def endpoint(self):
        return f"{self.store_domain}/api/{self.api_version}/graphql.json"

    def request(self, query, variables=None):
        """
        Run a GraphQL query and return its `data` object.

        Raises:
            StorefrontTransportError: Network failure, non-2xx status or bad JSON
            StorefrontQueryError: The response carried GraphQL errors
        """
        headers = {
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        }
        if self.access_token:
            headers[self.ACCESS_TOKEN_HEADER] = self.access_token

        try:
            response = self.session.post(
                self.endpoint,
                json={'query': query, 'variables': variables or {}},
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Storefront API request failed: %s", e)
            raise StorefrontTransportError(f"Failed to connect to Shopify: {e}") from e

        if not response.ok:
            logger.error(
                "Storefront API returned HTTP %s: %s",
                response.status_code,
                response.text[:500],
            )
            raise StorefrontTransportError(
                f"Storefront API returned HTTP {response.status_code}"
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.error("Storefront API returned invalid JSON: %s", e)
            raise StorefrontTransportError("Storefront API returned invalid JSON") from e

        if not isinstance(body, dict):
            raise StorefrontTransportError("Storefront API returned an unexpected body")

        if body.get('errors'):
            errors = body['errors']
            if not isinstance(errors, list):
                errors = [errors]
            logger.error("GraphQL errors: %s", errors)
            raise StorefrontQueryError("GraphQL query failed", errors)

        data = body.get('data')
        if not isinstance(data, dict):
            raise StorefrontTransportError("Storefront API response has no data")
        return data

    def fetch_shop(self):
        data = self.request(queries.GET_SHOP)
        return data.get('shop') or {}

    def fetch_collection(self, handle, limit=12):
        """
        Fetch products of a collection for the product grid.

        Returns:
            Collection, or None if no collection has this handle
        """
        data = self.request(
            queries.GET_COLLECTION_PRODUCTS,
            {'handle': handle, 'first': limit},
        )
        payload = data.get('collection')
        if not payload:
            logger.info("Collection %r not found", handle)
            return None
        return parse_payload(CollectionSerializer, payload, 'collection')

    def fetch_product_by_handle(self, handle):
        """
        Fetch full product details for the quick view.

        Returns:
            Product, or None if no product has this handle
        """
        data = self.request(queries.GET_PRODUCT_BY_HANDLE, {'handle': handle})
        payload = data.get('product')
        if not payload:
            logger.info("Product %r not found", handle)
            return None
        return parse_payload(ProductSerializer, payload, 'product')

    def fetch_collections(self, limit=10):
        """List collections as {id, handle, title} dicts."""
        data = self.request(queries.GET_COLLECTIONS, {'first': limit})
        collections = data.get('collections') or {}
        return list(collections.get('nodes') or [])


def get_storefront_client():
    return StorefrontClient.from_settings()
