"""Catalog routes."""

from rest_framework.routers import SimpleRouter  # type: ignore

from .views import ProductViewSet

router = SimpleRouter()
router.register(r"", ProductViewSet, basename="product")

urlpatterns = router.urls
