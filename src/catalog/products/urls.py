"""Product URL configuration.

Routes are served with or without a trailing slash.
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from catalog.products.views import ProductViewSet

router = SimpleRouter()
router.trailing_slash = "/?"
router.register("products", ProductViewSet, basename="product")

urlpatterns = router.urls
