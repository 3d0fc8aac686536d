from rest_framework import serializers
from hostel.models import User


class UserSerializer(serializers.ModelSerializer):
    """Serializer for User model - returns profile details"""

    class Meta:
        model = User
        fields = [
            'id', 'username', 'name', 'room_no', 'phone', 'parent_phone',
            'role', 'is_active', 'created_at'
        ]
        read_only_fields = ['id', 'username', 'role', 'is_active', 'created_at']


class StudentSummarySerializer(serializers.ModelSerializer):
    """Student columns shown next to requests in list views"""

    class Meta:
        model = User
        fields = ['id', 'name', 'username', 'room_no']
        read_only_fields = fields
