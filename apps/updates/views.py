from django.conf import settings
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import SiteSettings
from .permissions import IsAdmin
from .serializers import (
    SiteSettingsSerializer,
    VersionInfoSerializer,
    ReleaseSerializer,
)
from .services import UpdateService


def get_update_service():
    """Build the update feed client for this deployment."""
    return UpdateService.from_settings(settings)


@extend_schema(
    responses={200: VersionInfoSerializer},
    description="Compare the running version with the newest published release.",
    tags=['updates'],
)
@api_view(['GET'])
@permission_classes([IsAdmin])
def check_updates(request):
    """Update check - thin HTTP handler."""
    info = get_update_service().check_for_updates()
    return Response(VersionInfoSerializer(info).data)


@extend_schema(
    responses={200: ReleaseSerializer(many=True)},
    description="List every release of the update feed (empty if unreachable).",
    tags=['updates'],
)
@api_view(['GET'])
@permission_classes([IsAdmin])
def list_releases(request):
    releases = get_update_service().get_all_releases()
    return Response(ReleaseSerializer(releases, many=True).data)


@extend_schema(
    methods=['GET'],
    responses={200: SiteSettingsSerializer},
    tags=['updates'],
)
@extend_schema(
    methods=['PUT', 'PATCH'],
    request=SiteSettingsSerializer,
    responses={200: SiteSettingsSerializer},
    tags=['updates'],
)
@api_view(['GET', 'PUT', 'PATCH'])
@permission_classes([IsAdmin])
def site_settings(request):
    """Read or change the site-wide settings."""
    instance = SiteSettings.load()

    if request.method == 'GET':
        return Response(SiteSettingsSerializer(instance).data)

    serializer = SiteSettingsSerializer(instance, data=request.data, partial=request.method == 'PATCH')
    serializer.is_valid(raise_exception=True)
    serializer.save()
    return Response(serializer.data)
