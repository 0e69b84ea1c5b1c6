"""
URL configuration for the PVZ reception service.

The HTTP surface keeps the flat paths clients already call
(``/dummyLogin``, ``/pvz``, ``/receptions``...) and mounts the
OpenAPI schema under ``/api/``.
"""
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import ping

urlpatterns = [
    # Liveness
    path('ping', ping, name='ping'),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('', include('apps.accounts.urls')),

    # Pickup points, receptions and products
    path('', include('apps.pvz.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
