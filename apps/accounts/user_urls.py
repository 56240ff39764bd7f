from django.urls import path
from . import views

app_name = 'user-admin'

urlpatterns = [
    # GET    /api/users/        - List users (admin)
    # GET    /api/users/{id}/   - User detail (self or admin)
    # PATCH  /api/users/{id}/   - Update user (self or admin)
    # DELETE /api/users/{id}/   - Delete user (admin)
    path('', views.UserListView.as_view(), name='user-list'),
    path('<uuid:pk>/', views.UserDetailView.as_view(), name='user-detail'),
]
