"""
URL configuration for the raffle manager project.

Every API lives under /api/. Path segments keep the Portuguese resource
names used by the existing clients (sorteios, comprovantes, numeros, cupons).
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API endpoints
    path('api/users/', include('apps.accounts.user_urls')),
    path('api/sorteios/', include('apps.raffles.urls')),
    path('api/comprovantes/', include('apps.vouchers.urls')),
    path('api/numeros/', include('apps.numbers.urls')),
    path('api/cupons/', include('apps.coupons.urls')),
    path('api/system-config/', include('apps.configuration.urls')),
    path('api/dashboard/', include('apps.dashboard.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
