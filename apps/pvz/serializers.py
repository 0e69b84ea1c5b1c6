from rest_framework import serializers
from .models import PickupPoint, Reception, Product, City, ProductType


# =============================================================================
# Input Serializers
# =============================================================================

class PickupPointCreateSerializer(serializers.Serializer):
    """
    Validate input for pickup point creation.

    Fields:
        id (UUID): Optional caller-chosen id
        registrationDate (datetime): Optional registration date
        city (str): One of the served cities
    """

    id = serializers.UUIDField(required=False)
    registrationDate = serializers.DateTimeField(required=False)
    city = serializers.ChoiceField(choices=City.choices)


class PickupPointFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for the pickup point listing.

    Query Parameters:
        startDate (datetime): Products created at or after this moment
        endDate (datetime): Products created at or before this moment
        page (int): 1-based page over product rows
        limit (int): Product rows per page
    """

    startDate = serializers.DateTimeField(required=False)
    endDate = serializers.DateTimeField(required=False)
    page = serializers.IntegerField(required=False, min_value=1, default=1)
    limit = serializers.IntegerField(required=False, min_value=1, default=10)

    def validate(self, attrs):
        """Validate date range."""
        start = attrs.get('startDate')
        end = attrs.get('endDate')

        if start and end and start > end:
            raise serializers.ValidationError({
                'endDate': 'End date must be after start date'
            })

        return attrs


class ReceptionCreateSerializer(serializers.Serializer):
    """Validate input for opening a reception."""

    pvzId = serializers.UUIDField()


class ProductCreateSerializer(serializers.Serializer):
    """Validate input for adding a product."""

    pvzId = serializers.UUIDField()
    type = serializers.ChoiceField(choices=ProductType.choices)


# =============================================================================
# Output Serializers
# =============================================================================

class PickupPointSerializer(serializers.ModelSerializer):
    """Pickup point without nested data."""

    registrationDate = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = PickupPoint
        fields = ['id', 'registrationDate', 'city']
        read_only_fields = fields


class ReceptionSerializer(serializers.ModelSerializer):
    """Reception with its status derived from is_open."""

    dateTime = serializers.DateTimeField(source='created_at', read_only=True)
    pvzId = serializers.UUIDField(source='pickup_point_id', read_only=True)
    status = serializers.CharField(read_only=True)

    class Meta:
        model = Reception
        fields = ['id', 'dateTime', 'pvzId', 'status']
        read_only_fields = fields


class ProductSerializer(serializers.ModelSerializer):
    """Product as logged in its reception."""

    dateTime = serializers.DateTimeField(source='created_at', read_only=True)
    receptionId = serializers.UUIDField(source='reception_id', read_only=True)

    class Meta:
        model = Product
        fields = ['id', 'dateTime', 'type', 'receptionId']
        read_only_fields = fields


class ReceptionTreeSerializer(serializers.Serializer):
    """A reception and the products of the current page."""

    reception = ReceptionSerializer(read_only=True)
    products = ProductSerializer(many=True, read_only=True)


class PickupPointTreeSerializer(serializers.Serializer):
    """A pickup point with receptions and products of the current page."""

    pvz = PickupPointSerializer(source='pickup_point', read_only=True)
    receptions = ReceptionTreeSerializer(many=True, read_only=True)
