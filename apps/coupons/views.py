from rest_framework import viewsets, status, serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.accounts.permissions import IsAdminRole
from .models import Coupon
from .serializers import (
    CouponSerializer,
    CouponValidateQuerySerializer,
    CouponPublicSerializer,
)
from .services import (
    validate_coupon,
    CouponsServiceError,
    CouponNotFoundError,
)


# Response serializers for API documentation
class CouponValidationResponseSerializer(serializers.Serializer):
    valid = serializers.BooleanField()
    coupon = CouponPublicSerializer(required=False)
    error = serializers.CharField(required=False)


class CouponPagination(PageNumberPagination):
    page_size = 50
    page_size_query_param = 'page_size'
    max_page_size = 200


class CouponViewSet(viewsets.ModelViewSet):
    """
    Coupon management (cupons).

    CRUD is admin only; any authenticated user may check a code with
    GET /api/cupons/validar/?code=XYZ.
    """

    queryset = Coupon.objects.all()
    serializer_class = CouponSerializer
    pagination_class = CouponPagination
    lookup_value_regex = '[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}'

    def get_queryset(self):
        queryset = Coupon.objects.all()
        is_active = self.request.query_params.get('is_active')
        if is_active is not None:
            queryset = queryset.filter(is_active=is_active.lower() in ('1', 'true', 'yes'))
        return queryset

    def get_permissions(self):
        if self.action == 'validar':
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsAdminRole()]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='code', type=str, required=True, description='Coupon code'),
        ],
        responses={200: CouponValidationResponseSerializer, 404: CouponValidationResponseSerializer},
    )
    @action(detail=False, methods=['get'])
    def validar(self, request):
        """Check whether a coupon code can be used now."""
        query = CouponValidateQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        try:
            coupon = validate_coupon(code=query.validated_data['code'])
        except CouponNotFoundError as e:
            return Response({'valid': False, 'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CouponsServiceError as e:
            return Response({'valid': False, 'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'valid': True, 'coupon': CouponPublicSerializer(coupon).data})
