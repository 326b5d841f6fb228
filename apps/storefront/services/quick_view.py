"""
The quick view: a single "currently open product" with its own fetch.

Only the most recent `open()` may update the view. Each open hands out a
DetailRequest; a response for a request that was cancelled or superseded is
discarded when it arrives.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from apps.storefront.exceptions import StorefrontError
from apps.storefront.models import Product

from .variant_selection import VariantSelection

logger = logging.getLogger(__name__)


class ViewStatus(str, Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    NOT_FOUND = 'not_found'
    ERROR = 'error'


class DetailRequest:
    """Cancellation token for one product fetch."""

    def __init__(self, handle):
        self.handle = handle
        self.cancelled = False

    def __repr__(self):
        state = 'cancelled' if self.cancelled else 'active'
        return f"<DetailRequest {self.handle!r} {state}>"

    def cancel(self):
        self.cancelled = True


class QuickView:
    """
    Owns the open product, its loading status and its variant selection.

    Usage:
        view = QuickView(client.fetch_product_by_handle)
        request = view.open('classic-tee')
        view.load(request)
        ...
        request.cancel()  # or view.close()
    """

    def __init__(self, fetch_product: Callable[[str], Optional[Product]]):
        self.fetch_product = fetch_product
        self.status = ViewStatus.IDLE
        self.handle: Optional[str] = None
        self.product: Optional[Product] = None
        self.error: Optional[str] = None
        self.selection = VariantSelection()
        self._request: Optional[DetailRequest] = None

    @property
    def is_open(self):
        return self.handle is not None

    def open(self, handle) -> DetailRequest:
        """
        Show the product with this handle.

        Any request still in flight is cancelled. The returned request's
        `cancel` is the cleanup for this open. Opening another handle clears
        the selection; reopening the same handle keeps it.
        """
        if self._request is not None:
            self._request.cancel()

        if handle != self.handle:
            self.selection.update_product((), ())

        self._request = DetailRequest(handle)
        self.handle = handle
        self.status = ViewStatus.LOADING
        self.product = None
        self.error = None
        return self._request

    def close(self):
        if self._request is not None:
            self._request.cancel()
        self._request = None
        self.handle = None
        self.status = ViewStatus.IDLE
        self.product = None
        self.error = None
        self.selection.update_product((), ())

    def is_current(self, request: DetailRequest) -> bool:
        return request is self._request and not request.cancelled

    def load(self, request: Optional[DetailRequest] = None) -> bool:
        """
        Fetch the product for `request` (default: the current one).

        Returns:
            True if the response was applied, False if it was discarded
        """
        request = request or self._request
        if request is None or not self.is_current(request):
            return False

        try:
            product = self.fetch_product(request.handle)
        except StorefrontError as e:
            if not self.is_current(request):
                logger.debug("Discarding failed response for %r", request)
                return False
            logger.error("Failed to load product %r: %s", request.handle, e)
            self.status = ViewStatus.ERROR
            self.error = str(e) or "Failed to load product"
            return True

        if not self.is_current(request):
            logger.debug("Discarding stale response for %r", request)
            return False

        if product is None:
            self.status = ViewStatus.NOT_FOUND
            self.error = "Product not found"
            return True

        self.product = product
        self.status = ViewStatus.READY
        self.selection.update_product(product.options, product.variants)
        return True
