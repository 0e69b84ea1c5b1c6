from rest_framework import serializers
from .models import User, Role


class UserSerializer(serializers.ModelSerializer):
    """Registered account as returned by /register."""

    role = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'email', 'role']
        read_only_fields = fields

    def get_role(self, obj):
        return obj.primary_role


class DummyLoginSerializer(serializers.Serializer):
    """Serializer for role-only test logins."""

    role = serializers.ChoiceField(choices=Role.choices)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    role = serializers.ChoiceField(choices=Role.choices)


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
