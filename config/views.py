from django.http import JsonResponse
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema


@extend_schema(
    responses={200: str},
    description="Liveness probe.",
    tags=['service'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def ping(request):
    """Answer "pong" while the service is up."""
    return Response('pong')


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
