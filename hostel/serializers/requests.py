from django.conf import settings
from rest_framework import serializers
from hostel.models import OutpassRequest, Complaint
from hostel.serializers.auth import StudentSummarySerializer


class OutpassRequestSerializer(serializers.ModelSerializer):
    """
    Serializer for outpass requests.
    student and status are never taken from the client.
    """
    student_details = StudentSummarySerializer(source='student', read_only=True)

    class Meta:
        model = OutpassRequest
        fields = [
            'id', 'student', 'student_details', 'reason', 'leave_time',
            'return_time', 'status', 'created_at'
        ]
        read_only_fields = ['student', 'status', 'created_at']

    def validate_reason(self, value):
        if not value.strip():
            raise serializers.ValidationError('Please give a reason for leaving.')
        return value.strip()

    def validate(self, attrs):
        if getattr(settings, 'HOSTEL_ENFORCE_OUTPASS_WINDOW', False):
            if attrs['leave_time'] >= attrs['return_time']:
                raise serializers.ValidationError(
                    {'return_time': 'Return time must be after leave time.'}
                )
        return attrs


class ComplaintSerializer(serializers.ModelSerializer):
    student_details = StudentSummarySerializer(source='student', read_only=True)

    class Meta:
        model = Complaint
        fields = ['id', 'student', 'student_details', 'complaint_text', 'status', 'created_at']
        read_only_fields = ['student', 'status', 'created_at']

    def validate_complaint_text(self, value):
        if not value.strip():
            raise serializers.ValidationError('Complaint text cannot be empty.')
        return value.strip()


class StatusTransitionSerializer(serializers.Serializer):
    """
    Requested target status. Membership in the status enumeration is
    checked by the lifecycle service so every rejection reads the same.
    """
    status = serializers.CharField(max_length=20)
