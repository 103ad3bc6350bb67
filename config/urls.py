"""URL configuration for the rental center project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the landing page, the payment webhook and the application‑level routers
provided by Django Rest Framework and each app.
"""
from django.contrib import admin  # type: ignore
from django.contrib.auth import views as auth_views  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('login/', auth_views.LoginView.as_view(), name='login'),
    path('', include('apps.core.urls')),
    # Application URLs
    path('api/v1/products/', include('apps.products.urls')),
    path('api/v1/bookings/', include('apps.bookings.urls')),
    path('api/v1/commissions/', include('apps.commissions.urls')),
    path('api/v1/delivery/', include('apps.delivery.urls')),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Payment provider webhook
    path('api/stripe/', include('apps.payments.urls')),
]
