from django.urls import path

from .views import (
    CollectionDetailView,
    DebugCollectionsView,
    DebugShopView,
    ProductDetailView,
    ProductSelectionView,
)

urlpatterns = [
    path('products/<str:handle>/', ProductDetailView.as_view(), name='product-detail'),
    path(
        'products/<str:handle>/selection/',
        ProductSelectionView.as_view(),
        name='product-selection'
    ),
    path('collections/<str:handle>/', CollectionDetailView.as_view(), name='collection-detail'),
    path('debug/collections/', DebugCollectionsView.as_view(), name='debug-collections'),
    path('debug/shop/', DebugShopView.as_view(), name='debug-shop'),
]
