"""Product URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from catalog.products.views import ProductViewSet

router = DefaultRouter(trailing_slash=False)
router.register("product", ProductViewSet, basename="product")

urlpatterns = router.urls
