from django.urls import path
from . import views

app_name = 'configuration'

urlpatterns = [
    # GET /api/system-config/        - List all entries
    # GET /api/system-config/{key}/  - Get entry
    # PUT /api/system-config/{key}/  - Upsert entry (admin)
    path('', views.config_list, name='config-list'),
    path('<slug:key>/', views.config_detail, name='config-detail'),
]
