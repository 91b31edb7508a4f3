"""Route request serializers"""
from rest_framework import serializers

from ..models import RouteRequest


class RouteRequestSerializer(serializers.ModelSerializer):
    driverId = serializers.CharField(source='driver.username', read_only=True)
    routeName = serializers.CharField(source='route_name')
    description = serializers.CharField(required=False, allow_blank=True, default='')
    rejectionReason = serializers.CharField(source='rejection_reason', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    reviewedAt = serializers.DateTimeField(source='reviewed_at', read_only=True)

    class Meta:
        model = RouteRequest
        fields = ['id', 'driverId', 'routeName', 'description', 'status', 'rejectionReason', 'createdAt', 'reviewedAt']
        read_only_fields = ['status']


class RouteReviewSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True)
