from rest_framework import status, serializers as drf_serializers
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .permissions import Operation, RolePolicyPermission
from .serializers import (
    # Input serializers
    PickupPointCreateSerializer,
    PickupPointFilterSerializer,
    ReceptionCreateSerializer,
    ProductCreateSerializer,
    # Output serializers
    PickupPointSerializer,
    PickupPointTreeSerializer,
    ReceptionSerializer,
    ProductSerializer,
)
from .services import (
    create_pickup_point,
    open_reception,
    close_reception,
    add_product,
    delete_last_product,
    list_pickup_points,
    # Exceptions
    PvzServiceError,
    PvzValidationError,
    PvzNotFoundError,
    PvzConflictError,
)


class ErrorSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


SERVICE_ERROR_STATUS = (
    (PvzValidationError, status.HTTP_400_BAD_REQUEST),
    (PvzNotFoundError, status.HTTP_404_NOT_FOUND),
    (PvzConflictError, status.HTTP_409_CONFLICT),
)


def service_error_response(error: PvzServiceError) -> Response:
    """Translate a service exception into an error response."""
    for error_class, status_code in SERVICE_ERROR_STATUS:
        if isinstance(error, error_class):
            return Response({'error': str(error)}, status=status_code)
    return Response({'error': str(error)}, status=status.HTTP_400_BAD_REQUEST)


class PolicyAPIView(APIView):
    """Base view: authenticated, role checked against policy_operations."""

    permission_classes = [IsAuthenticated, RolePolicyPermission]
    policy_operations = {}


class PickupPointListCreateView(PolicyAPIView):
    """
    GET  /pvz - nested pickup point listing (moderator, employee)
    POST /pvz - create pickup point (moderator)
    """

    policy_operations = {
        'GET': Operation.LIST_PICKUP_POINTS,
        'POST': Operation.CREATE_PICKUP_POINT,
    }

    @extend_schema(
        parameters=[
            OpenApiParameter('startDate', OpenApiTypes.DATETIME, description='Products created from'),
            OpenApiParameter('endDate', OpenApiTypes.DATETIME, description='Products created until'),
            OpenApiParameter('page', OpenApiTypes.INT, description='Page number (1-based)'),
            OpenApiParameter('limit', OpenApiTypes.INT, description='Products per page'),
        ],
        responses={
            200: PickupPointTreeSerializer(many=True),
            400: ErrorSerializer,
        },
        description="List pickup points with receptions and products, paged over products.",
        tags=['pvz'],
    )
    def get(self, request):
        filter_serializer = PickupPointFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        try:
            trees = list_pickup_points(
                start_date=params.get('startDate'),
                end_date=params.get('endDate'),
                page=params['page'],
                limit=params['limit'],
            )
        except PvzServiceError as e:
            return service_error_response(e)

        return Response(PickupPointTreeSerializer(trees, many=True).data)

    @extend_schema(
        request=PickupPointCreateSerializer,
        responses={
            201: PickupPointSerializer,
            400: ErrorSerializer,
            403: ErrorSerializer,
            409: ErrorSerializer,
        },
        description="Create a pickup point.",
        tags=['pvz'],
    )
    def post(self, request):
        serializer = PickupPointCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            pickup_point = create_pickup_point(
                city=data['city'],
                pvz_id=data.get('id'),
                created_at=data.get('registrationDate'),
                created_by_id=request.user.id,
            )
        except PvzServiceError as e:
            return service_error_response(e)

        return Response(PickupPointSerializer(pickup_point).data, status=status.HTTP_201_CREATED)


class ReceptionCreateView(PolicyAPIView):
    """POST /receptions - open a reception (employee)."""

    policy_operations = {'POST': Operation.OPEN_RECEPTION}

    @extend_schema(
        request=ReceptionCreateSerializer,
        responses={
            201: ReceptionSerializer,
            400: ErrorSerializer,
            403: ErrorSerializer,
            404: ErrorSerializer,
            409: ErrorSerializer,
        },
        description="Open a reception at a pickup point.",
        tags=['receptions'],
    )
    def post(self, request):
        serializer = ReceptionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            reception = open_reception(
                pvz_id=serializer.validated_data['pvzId'],
                created_by_id=request.user.id,
            )
        except PvzServiceError as e:
            return service_error_response(e)

        return Response(ReceptionSerializer(reception).data, status=status.HTTP_201_CREATED)


class CloseLastReceptionView(PolicyAPIView):
    """POST /pvz/{pvzId}/close_last_reception - close the open reception (employee)."""

    policy_operations = {'POST': Operation.CLOSE_RECEPTION}

    @extend_schema(
        request=None,
        responses={
            200: ReceptionSerializer,
            403: ErrorSerializer,
            404: ErrorSerializer,
            409: ErrorSerializer,
        },
        description="Close the last reception of a pickup point.",
        tags=['pvz'],
    )
    def post(self, request, pvz_id):
        try:
            reception = close_reception(pvz_id=pvz_id)
        except PvzServiceError as e:
            return service_error_response(e)

        return Response(ReceptionSerializer(reception).data)


class ProductCreateView(PolicyAPIView):
    """POST /products - add a product to the open reception (employee)."""

    policy_operations = {'POST': Operation.ADD_PRODUCT}

    @extend_schema(
        request=ProductCreateSerializer,
        responses={
            201: ProductSerializer,
            400: ErrorSerializer,
            403: ErrorSerializer,
            404: ErrorSerializer,
            409: ErrorSerializer,
        },
        description="Add a product to the open reception of a pickup point.",
        tags=['products'],
    )
    def post(self, request):
        serializer = ProductCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = add_product(
                pvz_id=serializer.validated_data['pvzId'],
                product_type=serializer.validated_data['type'],
                created_by_id=request.user.id,
            )
        except PvzServiceError as e:
            return service_error_response(e)

        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)


class DeleteLastProductView(PolicyAPIView):
    """POST /pvz/{pvzId}/delete_last_product - LIFO product removal (employee)."""

    policy_operations = {'POST': Operation.DELETE_LAST_PRODUCT}

    @extend_schema(
        request=None,
        responses={
            200: ProductSerializer,
            403: ErrorSerializer,
            404: ErrorSerializer,
            409: ErrorSerializer,
        },
        description="Delete the most recently added product of the open reception.",
        tags=['pvz'],
    )
    def post(self, request, pvz_id):
        try:
            product = delete_last_product(pvz_id=pvz_id)
        except PvzServiceError as e:
            return service_error_response(e)

        return Response(ProductSerializer(product).data)
