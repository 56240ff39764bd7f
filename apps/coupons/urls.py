from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'coupons'

router = SimpleRouter()
router.register(r'', views.CouponViewSet, basename='coupon')

urlpatterns = [
    # GET    /api/cupons/                - List coupons (admin, ?is_active=)
    # POST   /api/cupons/                - Create coupon (admin)
    # GET    /api/cupons/validar/?code=  - Check a code (authenticated)
    # GET    /api/cupons/{id}/           - Coupon detail (admin)
    # PUT    /api/cupons/{id}/           - Update coupon (admin)
    # PATCH  /api/cupons/{id}/           - Partial update (admin)
    # DELETE /api/cupons/{id}/           - Delete coupon (admin)

    path('', include(router.urls)),
]
