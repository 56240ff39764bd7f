from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'vouchers'

router = SimpleRouter()
router.register(r'', views.VoucherViewSet, basename='voucher')

urlpatterns = [
    # GET    /api/comprovantes/                 - List vouchers (?status=, ?raffle=)
    # POST   /api/comprovantes/                 - Submit voucher
    # GET    /api/comprovantes/{id}/            - Voucher detail (owner or admin)
    # POST   /api/comprovantes/{id}/aprovar/    - Approve and issue numbers (admin)
    # POST   /api/comprovantes/{id}/rejeitar/   - Reject (admin)
    path('user/<uuid:user_id>/', views.user_vouchers, name='user-vouchers'),

    path('', include(router.urls)),
]
