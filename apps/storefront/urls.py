from django.urls import path
from . import views

app_name = 'storefront'

urlpatterns = [
    # Product grid
    path('', views.product_grid_view, name='product_grid'),

    # Quick view fragment
    path('products/<str:handle>/quick-view/', views.quick_view, name='quick_view'),
]
