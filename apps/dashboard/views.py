from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from .analytics import DashboardQueries
from .serializers import DashboardStatsSerializer


@extend_schema(
    responses={200: DashboardStatsSerializer},
    description="Administrator dashboard: counts, deposits, rankings and the current raffle.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def dashboard_stats(request):
    """Aggregated statistics - thin HTTP handler."""
    data = DashboardQueries.dashboard()
    return Response(DashboardStatsSerializer(data).data)
