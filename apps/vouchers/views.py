from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole, IsSelfOrAdmin
from apps.numbers.serializers import RaffleNumberSerializer
from apps.numbers.services import (
    NumbersServiceError,
    RaffleNotFoundError,
    InsufficientNumbersError,
)
from .models import Voucher
from .serializers import (
    VoucherSerializer,
    VoucherCreateSerializer,
    VoucherApproveSerializer,
    VoucherRejectSerializer,
    VoucherFilterSerializer,
    VoucherApprovalResponseSerializer,
)
from .services import (
    submit_voucher,
    approve_voucher,
    reject_voucher,
    # Exceptions
    VouchersServiceError,
    VoucherNotFoundError,
    RaffleUnavailableError,
    NotEnoughNumbersLeftError,
)


class VoucherPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


def _vouchers_queryset():
    return Voucher.objects.select_related('user', 'raffle', 'reviewed_by')


def _filter_vouchers(queryset, query_params):
    filters = VoucherFilterSerializer(data=query_params)
    filters.is_valid(raise_exception=True)
    if 'status' in filters.validated_data:
        queryset = queryset.filter(status=filters.validated_data['status'])
    if 'raffle' in filters.validated_data:
        queryset = queryset.filter(raffle_id=filters.validated_data['raffle'])
    return queryset


class VoucherViewSet(mixins.ListModelMixin,
                     mixins.RetrieveModelMixin,
                     mixins.CreateModelMixin,
                     viewsets.GenericViewSet):
    """
    Payment vouchers (comprovantes).

    list: own vouchers, or all for admins (?status=, ?raffle=)
    create: submit a voucher
    retrieve: owner or admin
    aprovar: approve and issue numbers (admin only)
    rejeitar: reject (admin only)
    """

    serializer_class = VoucherSerializer
    pagination_class = VoucherPagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Voucher.objects.none()
        queryset = _vouchers_queryset()
        if self.action == 'list':
            if not self.request.user.is_admin:
                queryset = queryset.filter(user=self.request.user)
            queryset = _filter_vouchers(queryset, self.request.query_params)
        return queryset

    def get_permissions(self):
        if self.action in ['aprovar', 'rejeitar']:
            return [IsAuthenticated(), IsAdminRole()]
        if self.action == 'retrieve':
            return [IsAuthenticated(), IsSelfOrAdmin()]
        return [IsAuthenticated()]

    @extend_schema(request=VoucherCreateSerializer, responses={201: VoucherSerializer})
    def create(self, request, *args, **kwargs):
        serializer = VoucherCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            voucher = submit_voucher(user=request.user, **serializer.validated_data)
        except RaffleUnavailableError as e:
            code = status.HTTP_404_NOT_FOUND if e.missing else status.HTTP_400_BAD_REQUEST
            return Response({'error': str(e)}, status=code)
        except NotEnoughNumbersLeftError as e:
            return Response(
                {'error': str(e), 'details': e.details},
                status=status.HTTP_400_BAD_REQUEST
            )
        except VouchersServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(VoucherSerializer(voucher).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=VoucherApproveSerializer, responses={200: VoucherApprovalResponseSerializer})
    @action(detail=True, methods=['post'])
    def aprovar(self, request, pk=None):
        """Approve a pending voucher and issue its numbers."""
        serializer = VoucherApproveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            voucher, numbers = approve_voucher(
                voucher_id=pk,
                approved_by=request.user,
                amount_read=serializer.validated_data['amount_read'],
            )
        except (VoucherNotFoundError, RaffleNotFoundError) as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InsufficientNumbersError as e:
            return Response(
                {'error': str(e), 'details': e.details},
                status=status.HTTP_400_BAD_REQUEST
            )
        except (VouchersServiceError, NumbersServiceError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'message': f'Voucher approved, {len(numbers)} numbers generated',
            'voucher': VoucherSerializer(voucher).data,
            'numbers': RaffleNumberSerializer(numbers, many=True).data,
        })

    @extend_schema(request=VoucherRejectSerializer, responses={200: VoucherSerializer})
    @action(detail=True, methods=['post'])
    def rejeitar(self, request, pk=None):
        """Reject a pending voucher."""
        serializer = VoucherRejectSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            voucher = reject_voucher(
                voucher_id=pk,
                rejected_by=request.user,
                admin_response=serializer.validated_data['admin_response'],
            )
        except VoucherNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except VouchersServiceError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(VoucherSerializer(voucher).data)


@extend_schema(
    responses={200: VoucherSerializer(many=True)},
    description="Vouchers submitted by a user (self or admin), ?status= and ?raffle= filters.",
    tags=['comprovantes'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def user_vouchers(request, user_id):
    if not request.user.is_admin and request.user.id != user_id:
        return Response(
            {'error': 'You can only access your own data.'},
            status=status.HTTP_403_FORBIDDEN
        )

    queryset = _filter_vouchers(
        _vouchers_queryset().filter(user_id=user_id),
        request.query_params
    )
    return Response(VoucherSerializer(queryset, many=True).data)
