from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole, IsAdminOrReadOnly
from .models import Raffle
from .serializers import (
    RaffleSerializer,
    RaffleListSerializer,
    RaffleWriteSerializer,
    DrawResultSerializer,
    WinnerSerializer,
    RaffleStatisticsSerializer,
)
from .services import (
    get_active_raffles,
    create_raffle,
    update_raffle,
    delete_raffle,
    get_raffle_statistics,
    resolve_draw,
    get_winners,
    # Exceptions
    RafflesServiceError,
    RaffleNotFoundError,
)


# Response serializers for API documentation
class DrawResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    raffle = RaffleSerializer()
    winners = WinnerSerializer(many=True)


class RafflePagination(PageNumberPagination):
    """Custom pagination for raffles."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class RaffleViewSet(viewsets.ModelViewSet):
    """
    ViewSet for raffles (sorteios).

    list: All raffles, optionally ?status=open|closed
    retrieve: Raffle with prizes
    create/update/partial_update/destroy: admin only
    ativos: open raffles
    estatisticas: sales statistics
    resultado: run the draw (admin only)
    ganhadores: winners with prizes and owners
    """

    queryset = Raffle.objects.prefetch_related('prizes')
    permission_classes = [IsAdminOrReadOnly]
    pagination_class = RafflePagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        queryset = Raffle.objects.prefetch_related('prizes')
        raffle_status = self.request.query_params.get('status')
        if raffle_status:
            queryset = queryset.filter(status=raffle_status)
        return queryset

    def get_serializer_class(self):
        if self.action == 'list':
            return RaffleListSerializer
        if self.action in ['create', 'update', 'partial_update']:
            return RaffleWriteSerializer
        return RaffleSerializer

    @extend_schema(request=RaffleWriteSerializer, responses={201: RaffleSerializer})
    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            raffle = create_raffle(**serializer.validated_data)
        except RafflesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(RaffleSerializer(raffle).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=RaffleWriteSerializer, responses={200: RaffleSerializer})
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        raffle = self.get_object()
        serializer = self.get_serializer(raffle, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            raffle = update_raffle(raffle_id=raffle.id, **serializer.validated_data)
        except RafflesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(RaffleSerializer(raffle).data)

    def destroy(self, request, *args, **kwargs):
        raffle = self.get_object()
        delete_raffle(raffle_id=raffle.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: RaffleSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def ativos(self, request):
        """Open raffles."""
        serializer = RaffleSerializer(get_active_raffles(), many=True)
        return Response(serializer.data)

    @extend_schema(responses={200: RaffleStatisticsSerializer})
    @action(detail=True, methods=['get'])
    def estatisticas(self, request, pk=None):
        """Numbers sold, remaining and participants."""
        try:
            stats = get_raffle_statistics(raffle_id=pk)
        except RaffleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(RaffleStatisticsSerializer(stats).data)

    @extend_schema(request=DrawResultSerializer, responses={200: DrawResponseSerializer})
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated, IsAdminRole])
    def resultado(self, request, pk=None):
        """Draw the winners and close the raffle (admin only)."""
        serializer = DrawResultSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            raffle, winners = resolve_draw(
                raffle_id=pk,
                result_type=serializer.validated_data['result_type'],
                manual_numbers=serializer.validated_data['numbers'],
                resolved_by=request.user,
            )
        except RaffleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except RafflesServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'message': 'Draw completed successfully',
            'raffle': RaffleSerializer(raffle).data,
            'winners': WinnerSerializer(winners, many=True).data,
        })

    @extend_schema(responses={200: WinnerSerializer(many=True)})
    @action(detail=True, methods=['get'])
    def ganhadores(self, request, pk=None):
        """Winning numbers with prize names and owners."""
        try:
            winners = get_winners(raffle_id=pk)
        except RaffleNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(WinnerSerializer(winners, many=True).data)
