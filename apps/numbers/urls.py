from django.urls import path
from . import views

app_name = 'numbers'

urlpatterns = [
    path('', views.NumberListView.as_view(), name='number-list'),
    path('gerar/', views.generate_numbers, name='generate'),
    path('user/<uuid:user_id>/', views.user_numbers, name='user-numbers'),
    path('sorteio/<uuid:raffle_id>/', views.raffle_numbers, name='raffle-numbers'),
]
