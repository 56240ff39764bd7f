from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'raffles'

router = SimpleRouter()
router.register(r'', views.RaffleViewSet, basename='raffle')

urlpatterns = [
    # GET    /api/sorteios/                     - List raffles (?status=)
    # POST   /api/sorteios/                     - Create raffle (admin)
    # GET    /api/sorteios/ativos/              - Open raffles
    # GET    /api/sorteios/{id}/                - Raffle with prizes
    # PUT    /api/sorteios/{id}/                - Update raffle (admin)
    # PATCH  /api/sorteios/{id}/                - Partial update (admin)
    # DELETE /api/sorteios/{id}/                - Delete raffle (admin)
    # GET    /api/sorteios/{id}/estatisticas/   - Sales statistics
    # POST   /api/sorteios/{id}/resultado/      - Run the draw (admin)
    # GET    /api/sorteios/{id}/ganhadores/     - Winners

    path('', include(router.urls)),
]
