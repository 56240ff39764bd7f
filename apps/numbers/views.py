from rest_framework import status, serializers, generics
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from apps.coupons.services import CouponsServiceError
from .models import RaffleNumber
from .serializers import (
    RaffleNumberSerializer,
    GenerateNumbersSerializer,
    NumberFilterSerializer,
)
from .services import (
    generate_numbers_for_amount,
    NumbersServiceError,
    RaffleNotFoundError,
    ParticipantNotFoundError,
    InsufficientNumbersError,
)


# Response serializers for API documentation
class GenerateNumbersResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    count = serializers.IntegerField()
    numbers = RaffleNumberSerializer(many=True)


class InsufficientNumbersResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    details = serializers.DictField(child=serializers.IntegerField())


class NumberPagination(PageNumberPagination):
    page_size = 100
    page_size_query_param = 'page_size'
    max_page_size = 1000


def _numbers_queryset():
    return RaffleNumber.objects.select_related('user', 'raffle')


class NumberListView(generics.ListAPIView):
    """
    List issued numbers.

    GET /api/numeros/?user=<uuid>&raffle=<uuid>

    Participants only ever see their own numbers.
    """
    serializer_class = RaffleNumberSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = NumberPagination

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return RaffleNumber.objects.none()
        filters = NumberFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)

        queryset = _numbers_queryset()
        if not self.request.user.is_admin:
            queryset = queryset.filter(user=self.request.user)
        elif 'user' in filters.validated_data:
            queryset = queryset.filter(user_id=filters.validated_data['user'])

        if 'raffle' in filters.validated_data:
            queryset = queryset.filter(raffle_id=filters.validated_data['raffle'])
        return queryset


@extend_schema(
    request=GenerateNumbersSerializer,
    responses={
        201: GenerateNumbersResponseSerializer,
        400: InsufficientNumbersResponseSerializer,
    },
    description="Issue the numbers an amount buys to a user (admin only).",
    tags=['numeros'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def generate_numbers(request):
    serializer = GenerateNumbersSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        numbers = generate_numbers_for_amount(
            raffle_id=serializer.validated_data['raffle_id'],
            user_id=serializer.validated_data['user_id'],
            amount=serializer.validated_data['amount'],
            coupon_code=serializer.validated_data['coupon_code'],
            discount_applied=serializer.validated_data['discount_applied'],
        )
    except (RaffleNotFoundError, ParticipantNotFoundError) as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InsufficientNumbersError as e:
        return Response(
            {'error': str(e), 'details': e.details},
            status=status.HTTP_400_BAD_REQUEST
        )
    except (NumbersServiceError, CouponsServiceError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': f'{len(numbers)} numbers generated',
        'count': len(numbers),
        'numbers': RaffleNumberSerializer(numbers, many=True).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: RaffleNumberSerializer(many=True)},
    description="Numbers held by a user, optionally ?raffle=<uuid>.",
    tags=['numeros'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_numbers(request, user_id):
    if not request.user.is_admin and request.user.id != user_id:
        return Response(
            {'error': 'You can only access your own data.'},
            status=status.HTTP_403_FORBIDDEN
        )

    filters = NumberFilterSerializer(data=request.query_params)
    filters.is_valid(raise_exception=True)

    queryset = _numbers_queryset().filter(user_id=user_id)
    if 'raffle' in filters.validated_data:
        queryset = queryset.filter(raffle_id=filters.validated_data['raffle'])
    return Response(RaffleNumberSerializer(queryset, many=True).data)


@extend_schema(
    responses={200: RaffleNumberSerializer(many=True)},
    description="Every number issued for a raffle (admin only).",
    tags=['numeros'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsAdminRole])
def raffle_numbers(request, raffle_id):
    queryset = _numbers_queryset().filter(raffle_id=raffle_id)
    return Response(RaffleNumberSerializer(queryset, many=True).data)
