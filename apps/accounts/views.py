from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .permissions import IsKitchenMember
from .serializers import (
    AccessCodeSerializer,
    LoginSerializer,
    CodeResolutionSerializer,
    IdentitySerializer,
    LoginResponseSerializer,
    ErrorResponseSerializer,
)
from .services import (
    resolve_access_code,
    issue_access_token,
    AccountsServiceError,
)


@extend_schema(
    request=AccessCodeSerializer,
    responses={
        200: CodeResolutionSerializer,
        400: ErrorResponseSerializer,
    },
    description="Resolve an access code to its role and, for restaurants, the chef roster.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def resolve_code(request):
    """First login step: which role does this code open?"""
    serializer = AccessCodeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        resolution = resolve_access_code(code=serializer.validated_data['code'])
    except AccountsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(CodeResolutionSerializer(resolution).data)


@extend_schema(
    request=LoginSerializer,
    responses={
        200: LoginResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Exchange an access code (and chef, for restaurants) for an access token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with an access code."""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        access, identity = issue_access_token(
            code=serializer.validated_data['code'],
            chef=serializer.validated_data.get('chef', ''),
        )
    except AccountsServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'access': access,
        'identity': IdentitySerializer(identity).data,
    })


@extend_schema(
    responses={200: IdentitySerializer},
    description="Get the identity carried by the current access token.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsKitchenMember])
def current_identity(request):
    """Get the signed-in role, restaurant and chef."""
    user = request.user
    return Response(IdentitySerializer({
        'role': user.role,
        'restaurant': user.restaurant,
        'chef': user.chef,
    }).data)
