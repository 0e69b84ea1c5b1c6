from rest_framework import status, serializers
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    DummyLoginSerializer,
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    issue_token,
    EmailAlreadyRegisteredError,
    InvalidRoleError,
    InvalidCredentialsError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=DummyLoginSerializer,
    responses={
        200: str,
        400: ErrorResponseSerializer,
    },
    description="Get a token for the given role without an account.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def dummy_login(request):
    """Issue a token carrying only a role."""
    serializer = DummyLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    token = issue_token(subject_id=None, role=serializer.validated_data['role'])
    return Response(token)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: UserSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Register a new user account.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        user = register_user(
            email=data['email'],
            password=data['password'],
            roles=[data['role']],
        )
    except InvalidRoleError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except EmailAlreadyRegisteredError as e:
        return Response({'error': str(e)}, status=status.HTTP_409_CONFLICT)

    return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: str,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive a token.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)

    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    token = issue_token(subject_id=user.id, role=user.primary_role)
    return Response(token)
