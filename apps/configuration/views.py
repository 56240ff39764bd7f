from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.accounts.permissions import IsAdminRole
from .models import SystemConfig
from .serializers import SystemConfigSerializer, SystemConfigUpdateSerializer
from .services import (
    get_config,
    set_config_value,
    ConfigNotFoundError,
    InvalidConfigValueError,
)


@extend_schema(
    responses={200: SystemConfigSerializer(many=True)},
    description="List every configuration entry (branding and raffle tunables).",
    tags=['system-config'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def config_list(request):
    configs = SystemConfig.objects.all()
    return Response(SystemConfigSerializer(configs, many=True).data)


@extend_schema(
    methods=['GET'],
    responses={200: SystemConfigSerializer},
    description="Get a single configuration entry.",
    tags=['system-config'],
)
@extend_schema(
    methods=['PUT'],
    request=SystemConfigUpdateSerializer,
    responses={200: SystemConfigSerializer},
    description="Create or update a configuration entry (admin only).",
    tags=['system-config'],
)
@api_view(['GET', 'PUT'])
@permission_classes([AllowAny])
def config_detail(request, key):
    """Read is public; write requires the admin role."""
    if request.method == 'GET':
        try:
            config = get_config(key=key)
        except ConfigNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(SystemConfigSerializer(config).data)

    if not IsAdminRole().has_permission(request, None):
        code = status.HTTP_403_FORBIDDEN if request.user.is_authenticated else status.HTTP_401_UNAUTHORIZED
        return Response({'error': 'Administrator access required.'}, status=code)

    serializer = SystemConfigUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        config = set_config_value(key=key, value=serializer.validated_data['value'])
    except InvalidConfigValueError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(SystemConfigSerializer(config).data)
