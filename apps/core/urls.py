from django.urls import path

from .views import healthz, landing

urlpatterns = [
    path("", landing, name="landing"),
    path("healthz/", healthz, name="healthz"),
]
