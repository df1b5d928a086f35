"""Product URL configuration, mounted under ``/api/``.

The ``id`` segment is captured as text so that malformed identifiers
reach the rule set and are reported as a 400.
"""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductDetailView, ProductListView

urlpatterns = [
    path("products", ProductListView.as_view(), name="product-list"),
    path("products/<str:id>", ProductDetailView.as_view(), name="product-detail"),
]
