"""
Authentication endpoints: login, JWT refresh, logout, the current user
and the provider directory.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError
from rest_framework_simplejwt.serializers import TokenRefreshSerializer

from .responses import ok
from .serializers.auth import LoginSerializer, LogoutSerializer, RefreshSerializer, UserSerializer
from .services import accounts
from .views.base import list_records


@api_view(['POST'])
@permission_classes([AllowAny])
def login_view(request):
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    result = accounts.login(request, s.validated_data['username'], s.validated_data['password'])
    return ok({
        'token': result['token'],
        'access': result['access'],
        'refresh': result['refresh'],
        'user': UserSerializer(result['user']).data,
    }, message='Login successful')

# ScopedRateThrottle reads throttle_scope off the APIView class
login_view.cls.throttle_scope = 'login'


@api_view(['POST'])
@permission_classes([AllowAny])
def refresh_view(request):
    s = RefreshSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    jwt = TokenRefreshSerializer(data={'refresh': s.validated_data['refresh']})
    try:
        jwt.is_valid(raise_exception=True)
    except TokenError as exc:
        raise InvalidToken(exc.args[0]) from exc
    return ok(jwt.validated_data)


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout_view(request):
    s = LogoutSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    count = accounts.logout(request.user, s.validated_data.get('refresh') or None)
    return ok({'blacklisted': count}, message='Logged out')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me_view(request):
    return ok(UserSerializer(request.user).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def providers_view(request):
    return list_records(request, accounts.providers, UserSerializer)
