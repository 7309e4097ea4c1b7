from rest_framework import serializers

from clinic.models import User


class LoginSerializer(serializers.Serializer):
    """Username and password only; any ``role`` the client sends is ignored."""
    username = serializers.CharField(trim_whitespace=True, error_messages={
        'required': 'Username is required',
        'blank': 'Username is required',
    })
    password = serializers.CharField(trim_whitespace=False, error_messages={
        'required': 'Password is required',
        'blank': 'Password is required',
    })


class RefreshSerializer(serializers.Serializer):
    refresh = serializers.CharField(error_messages={'required': 'Refresh token is required'})


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False, allow_blank=True)


class UserSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name')
    lastName = serializers.CharField(source='last_name')
    isActive = serializers.BooleanField(source='is_active')

    class Meta:
        model = User
        fields = ('id', 'username', 'firstName', 'lastName', 'email', 'phone', 'role', 'isActive')
        read_only_fields = fields
